"""Setup script for adifstore."""

from pathlib import Path

from setuptools import find_packages, setup

readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

# Build configuration
setup(
    name="adifstore",
    version="0.1.0",
    description="Parser, validator and indexed in-memory store for ADIF 3 contact logs",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        "platformdirs>=3.0",
        "rich>=13.0",
        "typer>=0.9",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "adifstore=adifstore.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Topic :: Communications :: Ham Radio",
        "Operating System :: OS Independent",
    ],
    zip_safe=False,
)
