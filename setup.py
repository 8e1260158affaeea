from setuptools import find_packages, setup

setup(
    name="persistconf",
    version="0.1.0",
    description="Persistence configuration resolution for SQLite, MongoDB and hybrid storage",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration models
        "typer",  # CLI
        "rich",  # Terminal formatting
        "pyyaml",  # YAML command output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pymongo",  # Driver-side parsing of built connection strings
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "persistconf=persistconf.cli:main",
        ],
    },
)
