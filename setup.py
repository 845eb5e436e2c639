# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="jyf",
    version="0.1.0",
    description="A small interpreted language with macros, multi-parent scopes and call-stack diagnostics",
    python_requires=">=3.10",
    packages=find_namespace_packages(include=["jyf", "jyf.*"]),
    install_requires=["termcolor>=2.1"],
    extras_require={"test": ["pytest", "hypothesis"]},
    entry_points={"console_scripts": ["jyf = jyf.cli:main"]},
    zip_safe=False,
)
