# setup.py
from setuptools import setup, find_packages

setup(
    name="quill",
    version="0.1.0",
    description="A minimal Lisp-family symbolic evaluator",
    packages=find_packages(include=["quill", "quill.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis>=6.84"],
    },
    entry_points={
        "console_scripts": ["quill=quill.repl:main"],
    },
    zip_safe=False,
)
