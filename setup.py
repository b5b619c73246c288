#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import setup
setup(name='wordgram',
    version='0.1',
    description='Formal grammars with validated alphabets and single-step derivation',
    packages=['wordgram', 'wordgram.tests'],
    package_dir={'': 'src'},
    python_requires='>=3.6',
    test_suite = "wordgram.tests",
    classifiers=[
        # Supported python versions
        'Programming Language :: Python :: 3',

        # Topics
        'Topic :: Software Development :: Libraries',
    ]
    )
