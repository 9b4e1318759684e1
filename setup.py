"""
redisgraph-client Setup Script

Install with: pip install -e .
"""

from setuptools import setup, find_packages

setup(
    name='redisgraph-client',
    version='0.1.0',
    description='Graph builder and command client for RedisGraph-protocol graph databases',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'falkordb>=1.0.0',
        'structlog>=23.1.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.4.0',
            'pytest-asyncio>=0.21.0',
        ],
    },
    python_requires='>=3.11',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Database :: Front-Ends',
    ],
)
