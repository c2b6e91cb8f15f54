"""
Setup script for packedbits - a pure Python package, nothing is compiled.
"""

from setuptools import find_packages
from setuptools import setup

LIBRARY = "packedbits"

# Read version and metadata
with open(f"{LIBRARY}/__version__.py", "r", encoding="UTF8") as v:
    exec(v.read())

with open("README.md", "r", encoding="UTF8") as f:
    long_description = f.read()

# Setup configuration
setup(
    name=LIBRARY,
    version=__version__,
    description="Compact fixed-length bit array",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=[LIBRARY, f"{LIBRARY}.*"]),
    python_requires=">=3.11",
    install_requires=[
        "numpy>=2.0",
        "psutil",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "rich",
        ],
    },
    zip_safe=False,
)
