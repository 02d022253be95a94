# setup.py
from setuptools import setup, find_packages

setup(
    name="guci",
    version="0.1.0",
    description="A small S-expression language: parser combinators and an evaluator with deferred bindings",
    packages=find_packages(include=["guci", "guci.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["guci=guci.repl:main"],
    },
    zip_safe=False,
)
