import os

from setuptools import find_packages, setup

with open(
    os.path.join(os.path.abspath(os.path.dirname(__file__)), "README.md"),
    encoding="utf-8",
) as f:
    long_description = f.read()

setup(
    name="longzip",
    version="1.0.0",
    description="Zip sequences out to the longest one, filling in typed defaults",
    long_description=long_description,
    long_description_content_type="text/markdown",
    keywords="zip,zip_longest,iterators,utilities",
    license="Apache",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "License :: OSI Approved :: Apache Software License",
        "Intended Audience :: Developers",
        "Programming Language :: Python",
    ],
    python_requires=">=3.9",
    install_requires=[],
    extras_require={"test": ["pytest"]},
    packages=find_packages(exclude=["tests", "tests.*"]),
    test_suite="tests",
)
