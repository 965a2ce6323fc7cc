""" eclab build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import eclab

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=eclab.name,
    version=eclab.__version__,
    license=eclab.__license__,
    author=eclab.__author__,
    author_email=eclab.__author_email__,
    description="Didactical finite-field, elliptic curve, and ECDSA arithmetic",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"eclab": ["ecc/data/*.json"]},
    include_package_data=True,
    # install_requires=[],
    extras_require={"test": ["pytest"]},
    keywords="elliptic-curves finite-fields ecdsa cryptography education",
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
