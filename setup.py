# Python version 3.8 and up.
from setuptools import setup, find_packages
from codecs import open
from os import path


here = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

install_reqs = ["pydantic>=2"]
test_reqs = ["pytest", "pytest-benchmark"]

setup(
    version='1.0.0',
    name='linked_lists',
    description='singly linked list with positional and value operations',
    keywords=('linked list', 'data structures'),
    long_description_content_type="text/markdown",
    long_description=long_description,
    license='public domain',
    packages=find_packages(exclude=("tests", "benchmarks")),
    install_requires=install_reqs,
    extras_require={"test": test_reqs},
    classifiers=[
        'Intended Audience :: Developers',
        'Programming Language :: Python :: 3'
    ],
)
