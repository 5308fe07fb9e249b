from setuptools import find_packages, setup

setup(
    name="aitk",
    version="0.1.0",
    description="AITK - link AI toolkit agents and skills into an assistant's discovery directory",
    packages=find_packages(include=["aitk", "aitk.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "typer<0.26",  # CLI framework (0.26+ vendors click; code uses click contexts directly)
        "click",  # Imported directly for CLI context and usage errors
        "rich",  # Terminal formatting
        "pydantic>=2",  # Config and output schemas
        "PyYAML",  # YAML command output
        "jinja2",  # Template rendering for CLI summaries
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "aitk=aitk.cli:main",
        ],
    },
)
