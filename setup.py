"""
Modbus Server Simulator - Setup Script
"""
from setuptools import setup, find_namespace_packages
import os

HERE = os.path.abspath(os.path.dirname(__file__))


def requirements(filename='requirements.txt'):
    """Non-comment lines of a requirements file next to this script."""
    with open(os.path.join(HERE, filename), encoding='utf-8') as f:
        lines = (line.split('#', 1)[0].strip() for line in f)
        return [line for line in lines if line]


setup(
    name='modbus-server-sim',
    version='0.1.0',
    description='Modbus server simulator core: settings cache, interpreter discovery and project graph',

    license='MIT',

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Intended Audience :: Manufacturing',
        'Topic :: System :: Networking',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Operating System :: Microsoft :: Windows',
        'Operating System :: POSIX :: Linux',
    ],

    keywords='modbus simulator server settings',

    # Modules are imported as src.core.*, src.models.*, src.ui.*
    packages=find_namespace_packages(include=['src', 'src.*']),

    python_requires='>=3.8',

    install_requires=requirements(),

    extras_require={
        'dev': [
            'pytest>=7.4.0',
            'pytest-qt>=4.2.0',
        ],
    },

    entry_points={
        'gui_scripts': [
            'modbus-server-sim=src.main:main',
        ],
    },
)
