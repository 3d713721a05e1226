from setuptools import setup, find_packages

setup(
    name="chronoterm",
    version="0.1.0",
    description="Terminal stopwatch with pause/resume, lap times & a live rich display",
    packages=find_packages(include=["chronoterm", "chronoterm.*"]),
    install_requires=[
        "typer",
        "rich",
        "readchar",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "chronoterm=chronoterm.cli.app:app",
        ],
    },
    python_requires=">=3.11",
)
