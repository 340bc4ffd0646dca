# setup.py
from setuptools import setup, find_packages

setup(
    name="minipyth",
    version="0.1.0",
    description="Interpreter for Minipyth, a point-free combinator golfing language",
    packages=find_packages(include=["minipyth", "minipyth.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["minipyth=minipyth.__main__:main"],
    },
    zip_safe=False,
)
