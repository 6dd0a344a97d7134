# -*- coding: utf-8 -*-
#
# Copyright (C) 2006 Edgewall Software
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution. The terms
# are also available at http://genshi.edgewall.org/wiki/License.
#
# This software consists of voluntary contributions made by many
# individuals. For the exact contribution history, see the revision
# history and logs, available at http://genshi.edgewall.org/log/.

"""This package generates XML (or HTML) text from markup described by plain
Python lists, tuples and dictionaries.

The design is centered around element descriptions of the form::

  [tag_name, attributes, *content]

where the attributes dictionary is optional, and the content is a sequence
of strings and further element descriptions.


Generating content
------------------

>>> from markuplist import render
>>> print(render(['html', ['head', ['title', 'My Web page']], ['body', 'Hello']]))
<html><head><title>My Web page</title></head><body>Hello</body></html>

Text is entity-encoded, unless it is wrapped in a list in the tag position
or in a `Markup` object, in which case it is included as is:

>>> print(render(['p', 'Fish & Chips ', [['&copy; 2013']], Markup('&trade;')]))
<p>Fish &amp; Chips &copy; 2013&trade;</p>

Attributes whose value is `None` are left out, which makes it easy to set an
attribute for only some elements:

>>> states = ['Alabama', 'Alaska']
>>> print(render(['select', {'name': 'State'},
...               (['option', {'selected': s == 'Alaska' and 'selected' or None}, s]
...                for s in states)]))
<select name="State"><option>Alabama</option><option selected="selected">Alaska</option></select>


Document prolog
---------------

>>> print(xml_decl() + doctype('html'))
<?xml version="1.0" encoding="UTF-8"?><!DOCTYPE html>


Building elements with objects
------------------------------

Elements can also be generated programmatically using the
`markuplist.builder` module:

>>> from markuplist.builder import tag
>>> print(tag.doc(tag.title('My document'), lang='en'))
<doc lang="en"><title>My document</title></doc>
"""

from markuplist.core import *
from markuplist.output import *
