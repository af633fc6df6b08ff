# setup.py
from setuptools import setup, find_packages

setup(
    name="keyscript",
    version="0.1.0",
    description="Tree-walking evaluator for data-encoded keyword scripts",
    packages=find_packages(include=["keyscript", "keyscript.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["keyscript = keyscript.cmdline:main"],
    },
    zip_safe=False,
)
