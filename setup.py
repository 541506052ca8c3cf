# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="layerlint",
    version="0.1.0",
    description="Linter for design-document layer trees: flags naming and structure problems before design-to-code conversion",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["layerlint", "layerlint.*"]),
    package_data={"layerlint.interface.locales": ["*.json"]},
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "PyYAML>=6.0",  # YAML snapshots and config files
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        'console_scripts': [
            'layerlint=layerlint.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
