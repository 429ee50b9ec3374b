#!/usr/bin/env python3
from setuptools import setup

setup(
    name='libcharinfo',
    version='1',
    license='GNU Affero GPL v3',
    author='Florian Leitner',
    author_email='florian.leitner@gmail.com',
    url='https://github.com/fnl/libcharinfo',
    description='locale-independent Unicode categories of UTF-16 code units',
    long_description=open('README.rst').read(),
    install_requires=[
        'unidecode',
    ],
    extras_require={
        'test': ['pytest'],
    },
    packages=[
        'charinfo',
        'charinfo.test',
    ],
    package_dir={'': 'src'},
    scripts=[
        'scripts/chartype.py',
        'scripts/chartypegen.py',
    ],
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'License :: OSI Approved :: GNU Affero General Public License v3',
        'Operating System :: POSIX',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries',
        'Topic :: Software Development :: Internationalization',
        'Topic :: Text Processing',
    ],
)
