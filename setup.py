# setup.py
from setuptools import setup, find_packages

setup(
    name="dw2level",
    version="0.1.0",
    packages=find_packages(include=['dw2level', 'dw2level.*']),
    install_requires=[
        "construct>=2.10",
        "numpy>=1.21",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
    description="Decoder and encoder for Digimon World 2 level files",
    keywords="digimon, dungeon, level, binary, reverse-engineering",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
