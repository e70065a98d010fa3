from setuptools import setup, find_packages

setup(
    name="emotropy",
    version="0.3.0",
    packages=find_packages(include=["emotropy", "emotropy.*"]),
    include_package_data=True,
    package_data={
        "emotropy": ["settings.yaml"],
    },
    python_requires=">=3.10",
    install_requires=[
        "click",
        "rich",
        "PyYAML",
        "python-dotenv",
        "pydantic>=2",
        "pygame>=2.1",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "emotropy=emotropy.cli.main:cli",
        ],
    },
)
