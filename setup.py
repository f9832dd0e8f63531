# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="mceval",
    version="0.1.0",
    description="Metacircular evaluator kernel for a small Scheme-like language",
    packages=find_namespace_packages(include=["mceval", "mceval.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["mceval=mceval.repl:main"]},
    zip_safe=False,
)
