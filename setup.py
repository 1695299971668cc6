from setuptools import find_packages, setup

setup(
    name="sysmod",
    version="0.1.0",
    description="sysmod - discover system modules and toggle their running and auto-start state",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config and output schema validation
        "typer<0.26",  # CLI (0.26+ vendors click; the CLI reads the shared click context)
        "click",  # Imported directly by the CLI
        "rich",  # Terminal formatting
        "PyYAML",  # YAML output display
        "psutil",  # Process identity checks
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "sysmodc=sysmod.cli:main",
        ],
    },
)
