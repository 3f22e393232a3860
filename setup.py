import os

from setuptools import setup, find_packages

with open(os.path.join(os.path.dirname(__file__), "readme.md"), "r") as fh:
    long_description = fh.read()

setup(
    name='restaurants',
    version='1.0.0',
    license='MIT',
    description='A CRUD REST API over a collection of restaurants and their inspection grades.',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires='>=3.8',
    install_requires=[
        'aiohttp',
        'aiohttp-cors',
        'marshmallow>=3.18,<4',
        'marshmallow-jsonschema',
        'tortoise-orm>=0.21',
        'uvloop',
        'sentry-sdk',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-aiohttp',
            'pytest-asyncio',
            'faker',
        ],
    },
    entry_points={
        'console_scripts': ['restaurants=restaurants.cli:run'],
    },
)
