# setup.py
from setuptools import setup, find_packages

setup(
    name="minima",
    version="0.3.0",
    description="A five-primitive S-expression language: reader, evaluator and REPL",
    packages=find_packages(include=["minima", "minima.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "minima=minima.repl:main",
            "minima-server=minima.repl_server:main",
        ],
    },
    zip_safe=False,
)
