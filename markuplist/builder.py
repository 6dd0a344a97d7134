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

"""Typed construction of markup nodes, as an alternative to describing
elements with plain lists and tuples.

Both kinds of description can be mixed freely, as the builder objects are
rendered by the same `markuplist.output.render()` function:

>>> from markuplist.output import render
>>> print(render(['ul', tag.li('one'), ['li', 'two']]))
<ul><li>one</li><li>two</li></ul>
"""

from collections.abc import Mapping

from markuplist.output import render, render_element

__all__ = ['Fragment', 'Element', 'tag']


class Fragment(object):
    """Represents a markup fragment, which is basically just a list of element
    or text nodes, rendered without any enclosing tag.
    """
    __slots__ = ['children']

    def __init__(self):
        self.children = []

    def __add__(self, other):
        return Fragment()(self, other)

    def __radd__(self, other):
        return Fragment()(other, self)

    def __call__(self, *args):
        for arg in args:
            self.append(arg)
        return self

    def __iter__(self):
        return iter(self.children)

    def __len__(self):
        return len(self.children)

    def __repr__(self):
        return '<%s>' % self.__class__.__name__

    def __str__(self):
        return str(self.__html__())

    def __html__(self):
        return render(*self.children)

    def append(self, node):
        """Append an element or string as child node.

        Nested fragments and other iterables are flattened into this fragment,
        while lists and tuples are kept as element descriptions:

        >>> frag = Fragment()
        >>> frag.append(['b', 'one'])
        >>> frag.append(str(n) for n in (2, 3))
        >>> frag.append(None)
        >>> len(frag)
        3
        """
        if isinstance(node, (Element, str, bytes, int, float, list, tuple,
                             Mapping)):
            # For objects of a known/primitive type, we avoid the check for
            # whether it is iterable for better performance
            self.children.append(node)
        elif isinstance(node, Fragment):
            self.children.extend(node.children)
        elif node is not None:
            try:
                for child in iter(node):
                    self.append(child)
            except TypeError:
                self.children.append(node)


def _kwargs_to_attrs(kwargs):
    return dict([(k.rstrip('_').replace('_', '-'), v)
                 for k, v in kwargs.items() if v is not None])


class Element(Fragment):
    """Simple XML output generator based on the builder pattern.

    Construct XML elements by passing the tag name to the constructor:

    >>> print(Element('strong'))
    <strong/>

    Attributes can be specified using keyword arguments. The values of the
    arguments will be converted to strings and any special XML characters
    escaped:

    >>> print(Element('textarea', rows=10, cols=60))
    <textarea rows="10" cols="60"/>
    >>> print(Element('span', title='1 < 2'))
    <span title="1 &lt; 2"/>
    >>> print(Element('span', title='"baz"'))
    <span title="&quot;baz&quot;"/>

    If an attribute value is `None`, that attribute is not included in the
    output, while a value of ``0`` is:

    >>> print(Element('a', name=None, tabindex=0))
    <a tabindex="0"/>

    Attribute names that conflict with Python keywords can be specified by
    appending an underscore, and other underscores are replaced by hyphens:

    >>> print(Element('div', class_='warning', data_id=7))
    <div class="warning" data-id="7"/>

    Nested elements and text can be added to an element using the call
    notation, which also accepts more attributes as keyword arguments:

    >>> print(Element('ul')(Element('li'), Element('li')))
    <ul><li/><li/></ul>
    >>> print(Element('a')('Label', href="target"))
    <a href="target">Label</a>
    >>> print(Element('p')('Hello ', Element('b')('world'), ' & "goodbye"'))
    <p>Hello <b>world</b> &amp; "goodbye"</p>

    An element without a tag name is rendered as its content only:

    >>> print(Element(None)('just ', Element('em')('this')))
    just <em>this</em>

    Elements can also be combined with other elements or strings using the
    addition operator, which results in a `Fragment` object that contains the
    operands:

    >>> print(Element('br') + 'some text' + Element('br'))
    <br/>some text<br/>
    """
    __slots__ = ['tag', 'attrib']

    def __init__(self, tag_, **attrib):
        Fragment.__init__(self)
        self.tag = tag_
        self.attrib = _kwargs_to_attrs(attrib)

    def __call__(self, *args, **kwargs):
        self.attrib.update(_kwargs_to_attrs(kwargs))
        Fragment.__call__(self, *args)
        return self

    def __repr__(self):
        return '<%s "%s">' % (self.__class__.__name__, self.tag)

    def __html__(self):
        return render_element([self.tag, self.attrib] + self.children)


class ElementFactory(object):
    """Factory for `Element` objects.

    A new element is created simply by accessing a correspondingly named
    attribute of the factory object:

    >>> factory = ElementFactory()
    >>> print(factory.foo)
    <foo/>
    >>> print(factory.foo(id=2))
    <foo id="2"/>

    Names that are not valid Python identifiers can be given using item
    access:

    >>> print(factory['xsl:template'](match='/'))
    <xsl:template match="/"/>

    Markup fragments (lists of nodes without a parent element) can be created
    by calling the factory:

    >>> print(factory('Hello, ', factory.em('world'), '!'))
    Hello, <em>world</em>!

    Usually, the `ElementFactory` class is not used directly. Rather, the
    `tag` instance should be used to create elements.
    """

    def __call__(self, *args):
        return Fragment()(*args)

    def __getitem__(self, name):
        """Create an `Element` with the given name."""
        return Element(name)

    def __getattr__(self, name):
        """Create an `Element` with the given name."""
        if name.startswith('__'):
            raise AttributeError(name)
        return Element(name)


tag = ElementFactory()
