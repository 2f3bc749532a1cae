"""
setup.py for the phrasebind package.

Usage:
    pip install -e .[test]
"""
from setuptools import find_packages, setup

about = {}
with open("phrasebind/__version__.py") as f:
    exec(f.read(), about)

setup(
    name="phrasebind",
    version=about["__version__"],
    description="Translators bound to store state, rebuilt only when their inputs change",
    packages=find_packages(include=["phrasebind", "phrasebind.*"]),
    package_data={"phrasebind": ["py.typed"]},
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
