from setuptools import setup, find_packages

setup(
    name="tictactoe-frenzy",
    version="0.1.0",
    packages=find_packages(include=["tictactoe", "tictactoe.*"]),
    install_requires=[
        "numpy",
        "gymnasium",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "tictactoe=tictactoe.interfaces.cli:main",
        ],
    },
)
