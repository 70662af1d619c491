#!/usr/bin/env python3

import re
from pathlib import Path
from setuptools import setup, find_packages

def version():
    init = (Path(__file__).parent / 'rosettas' / '__init__.py').read_text()
    return re.search(r"^__version__ = '([^']+)'", init, re.MULTILINE).group(1)

setup(
    name='rosettas',
    version=version(),
    author='The rosettas authors',
    description='Draw hypotrochoid rosetta curves into animated SVG files',
    long_description=Path('README.md').read_text(),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['tests']),
    include_package_data=True,
    install_requires=['click'],
    extras_require={
        'test': ['pytest', 'beautifulsoup4', 'lxml'],
    },
    entry_points={
        'console_scripts': [
            'rosettas = rosettas.cli:cli',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: End Users/Desktop',
        'License :: OSI Approved :: Apache Software License',
        'Natural Language :: English',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Topic :: Artistic Software',
        'Topic :: Multimedia :: Graphics',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Typing :: Typed',
    ],
    keywords='hypotrochoid spirograph rosetta svg',
    python_requires='>=3.10',
)
