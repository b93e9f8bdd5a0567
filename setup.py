# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="assetlink",
    version="1.0.0",
    description="Generate TypeScript constants from the files of a static asset directory",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["assetlink*"]),
    package_data={
        "assetlink.interface.locales": ["*.json"],
    },
    python_requires=">=3.8",
    install_requires=[
        "PyYAML",  # YAML configuration files
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'assetlink=assetlink.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
