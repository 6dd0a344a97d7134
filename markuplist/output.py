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

"""This module renders markup described by lists and tuples into XML text,
and provides the helpers for the document prolog and for emitting single
tags.
"""

from collections.abc import Mapping
import logging

from markuplist.core import escape, escape_uri, Markup

__all__ = ['DocType', 'render', 'render_element', 'render_attrs',
           'start_tag', 'end_tag', 'xml_decl', 'doctype']

log = logging.getLogger(__name__)


class DocType(object):
    """Defines a number of commonly used DOCTYPE declarations as constants.

    >>> print(doctype(*DocType.HTML_STRICT))
    <!DOCTYPE html PUBLIC "-//W3C//DTD HTML 4.01//EN" "http://www.w3.org/TR/html4/strict.dtd">
    >>> print(doctype(*DocType.HTML5))
    <!DOCTYPE html>
    """

    HTML_STRICT = ('html', '-//W3C//DTD HTML 4.01//EN',
                   'http://www.w3.org/TR/html4/strict.dtd')
    HTML_TRANSITIONAL = ('html', '-//W3C//DTD HTML 4.01 Transitional//EN',
                         'http://www.w3.org/TR/html4/loose.dtd')
    HTML = HTML_STRICT

    HTML5 = ('html', None, None)

    XHTML_STRICT = ('html', '-//W3C//DTD XHTML 1.0 Strict//EN',
                    'http://www.w3.org/TR/xhtml1/DTD/xhtml1-strict.dtd')
    XHTML_TRANSITIONAL = ('html', '-//W3C//DTD XHTML 1.0 Transitional//EN',
                          'http://www.w3.org/TR/xhtml1/DTD/xhtml1-transitional.dtd')
    XHTML = XHTML_STRICT


def render(*nodes, encoding=None):
    """Render a sequence of nodes into XML text.

    Strings are encoded, so that only ``&`` and ``<`` are replaced by entity
    references:

    >>> print(render('Hi there, this & that'))
    Hi there, this &amp; that

    A list or tuple describes an element, as ``[tag, attributes, *content]``:

    >>> print(render(['html', ['head', ['title', 'My Web page']],
    ...                       ['body', {'class': 'main'}, 'Hello']]))
    <html><head><title>My Web page</title></head><body class="main">Hello</body></html>

    Any other iterable is rendered as a group of nodes, which makes it easy to
    build content with generator expressions or `map()`. A false tag name
    replaces the element by its content:

    >>> print(render(['p', [n > 100 and 'b', n]] for n in (4, 450, 12)))
    <p>4</p><p><b>450</b></p><p>12</p>

    `None` and `False` nodes produce no output. If `encoding` is given, the
    result is returned as bytes; characters the codec cannot represent are
    written as numeric character references:

    >>> render(['p', 'caf\\xe9'], encoding='ascii')
    b'<p>caf&#233;</p>'
    """
    output = Markup(''.join(_serialize(nodes)))
    if encoding is not None:
        return output.encode(encoding, 'xmlcharrefreplace')
    return output


def _serialize(nodes):
    for node in nodes:
        if node is None or node is False:
            continue
        if isinstance(node, str):
            if hasattr(node, '__html__'):
                yield node
            else:
                yield escape(node, quotes=False)
        elif isinstance(node, (list, tuple)):
            yield render_element(node)
        elif hasattr(node, '__html__'):
            yield node.__html__()
        elif isinstance(node, (bytes, bytearray)):
            yield escape(bytes(node).decode('utf-8', 'replace'), quotes=False)
        elif isinstance(node, Mapping):
            log.debug('Mapping %r in content position rendered as text', node)
            yield escape(node, quotes=False)
        elif hasattr(node, '__iter__'):
            for fragment in _serialize(node):
                yield fragment
        else:
            yield escape(node, quotes=False)


def render_element(descriptor):
    """Render a single element from its ``(tag, attributes, *content)``
    description.

    >>> print(render_element(('a', {'href': '/?a=1&b=2'}, 'Next')))
    <a href="/?a=1&amp;b=2">Next</a>

    The attributes can be left out entirely:

    >>> print(render_element(('em', 'Hello ', ('b', 'world'))))
    <em>Hello <b>world</b></em>

    An element without content is written as an empty-element tag:

    >>> print(render_element(('br',)))
    <br/>

    If the tag is itself a list or tuple, its first item is included in the
    output as is, without encoding and without any tags. This is the way to
    include text that is already entity-encoded:

    >>> print(render_element((['&copy; Angel Networks&trade;'],)))
    &copy; Angel Networks&trade;
    """
    if not descriptor:
        return Markup()
    tagname = descriptor[0]
    if isinstance(tagname, (list, tuple)):
        if not tagname or tagname[0] is None:
            return Markup()
        return Markup(tagname[0])

    attrs = descriptor[1] if len(descriptor) > 1 else None
    content = descriptor[2:]
    if attrs is not None and not isinstance(attrs, Mapping):
        content = (attrs,) + tuple(content)
        attrs = None

    if not tagname:
        return render(*content)
    tagname = str(tagname)

    buf = ['<', tagname, render_attrs(attrs)]
    if content:
        buf += ['>', render(*content), '</', tagname, '>']
    else:
        buf += ['/>']
    return Markup(''.join(buf))


def render_attrs(attrs):
    """Render a mapping of attributes for use in a tag.

    Attributes whose value is `None` are left out; every other value is
    converted to a string and encoded, including ``0`` and the empty string.

    >>> print(render_attrs({'name': 'q', 'value': 0, 'title': None}))
     name="q" value="0"
    >>> render_attrs({})
    ''
    """
    if not attrs:
        return ''
    buf = []
    for name, value in attrs.items():
        if value is not None:
            buf += [' ', str(name), '="', escape(value), '"']
    return ''.join(buf)


def start_tag(element, attrs=None):
    """Return only the start tag of an element.

    This and `end_tag()` are useful for writing out XML piecewise, rather
    than building the whole document in memory first.

    >>> print(start_tag('td', {'colspan': 3}))
    <td colspan="3">
    >>> print(start_tag(['td', {'colspan': 3}, 'ignored content']))
    <td colspan="3">
    >>> print(end_tag('td'))
    </td>
    """
    if isinstance(element, (list, tuple)):
        tagname = element[0]
        if attrs is None and len(element) > 1 \
                and isinstance(element[1], Mapping):
            attrs = element[1]
    elif hasattr(element, 'attrib'):
        tagname = element.tag
        if attrs is None:
            attrs = element.attrib
    else:
        tagname = element
    return Markup(''.join(['<', tagname or '', render_attrs(attrs), '>']))


def end_tag(element):
    """Return the end tag for an element name."""
    return Markup('</%s>' % getattr(element, 'tag', element))


def xml_decl(version=None, encoding=None, standalone=None):
    """Return an XML declaration.

    >>> print(xml_decl())
    <?xml version="1.0" encoding="UTF-8"?>
    >>> print(xml_decl('1.1', 'ISO-8859-1', True))
    <?xml version="1.1" encoding="ISO-8859-1" standalone="yes"?>
    """
    if isinstance(standalone, bool):
        standalone = standalone and 'yes' or 'no'
    attrs = {'version': version or '1.0', 'encoding': encoding or 'UTF-8',
             'standalone': standalone}
    return Markup('<?xml%s?>' % render_attrs(attrs))


def doctype(root=None, pubid=None, sysid=None, subset=None):
    """Return a DOCTYPE declaration.

    >>> print(doctype('html'))
    <!DOCTYPE html>
    >>> print(doctype('note', sysid='note dtd/note.dtd'))
    <!DOCTYPE note SYSTEM "note%20dtd/note.dtd">

    An internal subset is included in square brackets:

    >>> print(doctype('note', subset='<!ENTITY writer "Donald Duck.">'))
    <!DOCTYPE note [ <!ENTITY writer "Donald Duck."> ]>
    """
    buf = ['<!DOCTYPE', root or 'XML']
    if sysid:
        sysid = '"%s"' % escape_uri(sysid)
    if pubid:
        buf += ['PUBLIC', '"%s"' % pubid]
        if sysid:
            buf += [sysid]
    elif sysid:
        buf += ['SYSTEM', sysid]
    if subset:
        buf += ['[ %s ]' % subset]
    return Markup(' '.join(buf) + '>')
