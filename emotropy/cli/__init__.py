from emotropy.cli.main import cli

__all__ = ["cli"]
