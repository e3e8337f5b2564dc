"""
Setup script for the IP Ranges document parser.
"""

from setuptools import setup, find_packages

setup(
    name="ipranges",
    version="1.0.0",
    description="Parser for XML documents describing published IP address ranges",
    author="IP Ranges Team",
    packages=find_packages(exclude=["test", "test.*"]),
    include_package_data=True,
    install_requires=[
        "lxml",
        "pyyaml",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "ipranges=cli.ipranges_cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
