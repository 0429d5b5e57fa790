from setuptools import find_packages, setup

setup(
    name="mdlinks",
    version="0.1.0",
    description="Follow and create path references in markdown documents",
    packages=find_packages(include=["mdlinks", "mdlinks.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "typer",  # CLI
        "pydantic>=2",  # Configuration and output schemas
        "rich",  # Terminal formatting
        "pyyaml",  # YAML command output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
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
            "mdlinks=mdlinks.cli:main",
        ],
    },
)
