"""Setup script for hashreg."""

from setuptools import find_packages, setup

setup(
    name="hashreg",
    version="0.1.0",
    description="Cryptographic hash function identifier registry",
    python_requires=">=3.10",
    packages=find_packages(include=["hashreg", "hashreg.*"]),
    install_requires=[
        "blake3>=0.4",
        "click>=8.1",
        "dependency-injector>=4.41",
        "pycryptodome>=3.19",
        "pydantic>=2.5",
        "pydantic-settings>=2.7",
        "tomli>=2.0; python_version < '3.11'",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    entry_points={
        "console_scripts": [
            "hashreg=hashreg.__main__:main",
        ],
    },
)
