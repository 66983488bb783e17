# setup.py
from setuptools import setup, find_packages

setup(
    name="minilisp",
    version="0.1.0",
    description="Integer-only Lisp dialect evaluated straight off the token stream",
    packages=find_packages(include=["minilisp", "minilisp.*"]),
    python_requires=">=3.11",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "minilisp=minilisp.__main__:main",
            "minilisp-server=minilisp.repl_server:main",
        ],
    },
    zip_safe=False,
)
