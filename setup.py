# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="programmanager",
    version="1.0.0",
    description="Desktop and CLI manager for program/version/module directory trees",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["programmanager*"]),
    package_data={
        "programmanager.interface": ["locales/*.json"],
    },
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "customtkinter",  # Desktop window (interface/gui)
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'programmanager=programmanager.main:main',  # CLI with arguments, GUI without
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
