# setup.py
from setuptools import find_namespace_packages, setup

setup(
    name="import-collapser",
    version="1.0.3",
    description="Collapse and analyze the import dependencies of JavaScript/TypeScript components",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["import_collapser", "import_collapser.*"]),
    python_requires=">=3.9",
    install_requires=[
        "tree-sitter>=0.23",
        "tree-sitter-javascript>=0.23",
        "tree-sitter-typescript>=0.23",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'import-collapser=import_collapser.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
