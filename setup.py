import re

from setuptools import setup, find_packages


with open("README.md", "r") as fh:
    long_description = fh.read()


with open("requirements.txt") as f:
    requirements = f.read().splitlines()


# read the version without importing the package and its requirements
with open("protokit/__init__.py") as f:
    version = re.search(r'__version__ = "([^"]+)"', f.read()).group(1)


description = (
    "Circular reference safe flattening of object graphs and property views"
)


setup(
    name="protokit",
    version=version,
    packages=find_packages(where=".", exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=requirements,
    extras_require={
        "test": ["pytest"],
        "docs": [
            "sphinx",
            "sphinx-automodapi",
            "sphinx-copybutton",
            "sphinx-book-theme",
            "myst-parser",
        ],
    },
    description=description,
    long_description=long_description,
    long_description_content_type="text/markdown",
)
