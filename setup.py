from setuptools import setup, find_packages

setup(
    name="tictactoe_ai",
    version="0.1",
    description="Tic-tac-toe move engine: minimax with alpha-beta pruning and difficulty levels",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "tictactoe-ai=tictactoe_ai.demo:main",
        ],
    },
)
