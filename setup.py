""" cairo_hints build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import cairo_hints

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=cairo_hints.name,
    version=cairo_hints.__version__,
    license=cairo_hints.__license__,
    author=cairo_hints.__author__,
    author_email=cairo_hints.__author_email__,
    description="Builtin hints for the Cairo virtual machine",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    # install_requires=[],
    extras_require={
        "test": ["pytest"],
        "docs": ["sphinx", "sphinx_rtd_theme", "myst_parser"],
    },
    keywords=(
        "cairo stark elliptic-curves hint virtual-machine random-ec-point "
        "tonelli-shanks"
    ),
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
