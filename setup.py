# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="includewalker",
    version="1.0.0",
    description="Include order and include cycle analysis for C/C++ source trees",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["includewalker*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'includewalker=includewalker.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
