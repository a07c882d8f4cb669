from setuptools import setup, find_packages

setup(
    name = "docmeta",
    version = "0.1.0",
    packages = find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "aiofiles",
        "loguru",
        "lxml>=4.9",
        "pydantic>=2.0",
        "PyYAML",
        "tqdm",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio==1.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "docmeta=docmeta.pipeline:cli",
        ],
    },
    python_requires = ">=3.9",
)
