import logging

import pytest

from emotropy.logging_config import setup_logging


@pytest.fixture(autouse=True)
def isolated_logging(tmp_path):
    """
    Gives every test a DEBUG root logger writing into its own directory,
    and closes the handlers afterwards so log files are not left open.
    """
    setup_logging(level="DEBUG", log_dir=str(tmp_path / "logs"))
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)
