from setuptools import setup, find_packages

# To use a consistent encoding
from codecs import open
from os import path

# The directory containing this file
HERE = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(HERE, 'README.rst'), encoding='utf-8') as f:
    readme_content = f.read()

# This call to setup() does all the work
setup(
    name='signedint',
    packages=find_packages(exclude=['test', 'test.*', 'doc']),
    version='0.1.0',
    description='Fixed-width signed integers in two\'s complement',
    long_description=readme_content,
    long_description_content_type='text/x-rst',
    author='signedint developers',
    license='MIT',
    python_requires='>=3.8',
    install_requires=[],
    extras_require={
        'test': ['pytest'],
        'doc': ['sphinx', 'furo', 'sphinx-autodoc-typehints'],
    },
)
