# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="treeforge",
    version="1.0.0",
    description="Create a directory tree on disk from a JSON or YAML structure file",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["treeforge*"]),
    package_data={
        "treeforge": ["interface/locales/*.json"],
    },
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "customtkinter",  # Desktop interface
        "PyYAML",  # .yaml / .yml structure files
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'treeforge=treeforge.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
