#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Copyright (C) 2006-2010 Edgewall Software
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution. The terms
# are also available at http://genshi.edgewall.org/wiki/License.
#
# This software consists of voluntary contributions made by many
# individuals. For the exact contribution history, see the revision
# history and logs, available at http://genshi.edgewall.org/log/.

from setuptools import setup, find_packages


setup(
    name = 'markuplist',
    version = '1.0.0',
    description = 'Output XML and HTML described by Python lists',
    long_description = \
"""markuplist renders nested lists and tuples of the form
``[tag, attributes, *content]`` into well-formed XML or HTML text, with
proper entity encoding, literal content, and helpers for the XML declaration,
DOCTYPE declarations and separately emitted start and end tags.""",
    license = 'BSD',
    classifiers = [
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Text Processing :: Markup :: HTML',
        'Topic :: Text Processing :: Markup :: XML',
    ],
    keywords = ['html', 'xml', 'markup', 'builder'],
    packages = find_packages(),
    python_requires = '>=3.7',
    test_suite = 'markuplist.tests.suite',
    zip_safe = True,
)
