from setuptools import find_packages, setup

setup(
    name="hyperdiff",
    version="0.1.0",
    description="Hyperdiff - line-level git diffs for code review",
    packages=find_packages(include=["hyperdiff", "hyperdiff.*"]),
    python_requires=">=3.10",
    install_requires=[
        "GitPython",  # Git object store access
        "pydantic>=2",  # Configuration models
        "typer>=0.12,<0.20",  # CLI
        "click>=8.1",  # CLI context and exceptions used directly
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "hdiff=hyperdiff.cli:main",
        ],
    },
)
