from setuptools import find_packages, setup

setup(
    name="linkstrip",
    version="0.1.0",
    description="Remove Markdown hyperlinks and Obsidian wikilinks from text",
    packages=find_packages(include=["linkstrip", "linkstrip.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.9,<0.26",  # CLI framework; 0.26+ vendors click, breaking click.get_current_context
        "click",  # Typer context and exceptions
        "rich",  # Terminal formatting
        "pydantic>=2.0",  # Config and output schemas
        "PyYAML",  # YAML output
        "pygments",  # Output highlighting on a TTY
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "linkstrip=linkstrip.cli:main",
        ],
    },
)
