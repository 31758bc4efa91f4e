# setup.py
from setuptools import setup, find_packages

setup(
    name="swisp",
    version="0.1.0",
    description="A minimal Lisp with a trampolined, tail-call safe evaluator",
    packages=find_packages(include=["swisp", "swisp.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["swisp = swisp.__main__:main"],
    },
    zip_safe=False,
)
