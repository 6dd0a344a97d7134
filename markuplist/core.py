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

"""Core classes and functions for entity and URI encoding."""

from urllib.parse import quote

__all__ = ['Markup', 'escape', 'unescape', 'escape_uri']


class Markup(str):
    """Marks a string as being safe for inclusion in HTML/XML output without
    needing to be escaped.

    >>> Markup('&copy; 2013')
    <Markup '&copy; 2013'>

    Concatenating a `Markup` object with a plain string escapes the plain
    string, so the result stays safe:

    >>> Markup('<?xml version="1.0"?>') + '<R&D/>' + Markup('<doc/>')
    <Markup '<?xml version="1.0"?>&lt;R&amp;D/><doc/>'>
    """
    __slots__ = []

    def __add__(self, other):
        return Markup(str(self) + str(escape(other)))

    def __radd__(self, other):
        return Markup(str(escape(other)) + str(self))

    def __repr__(self):
        return '<%s %r>' % (self.__class__.__name__, str(self))

    def __html__(self):
        return self

    @classmethod
    def escape(cls, text, quotes=True):
        """Create a Markup instance from a string and escape the characters
        that would otherwise be read as markup (``&`` and ``<``).

        If the `quotes` parameter is set to `False`, the ``"`` character is
        left as is. Escaping quotes is only required for strings that are to
        be used in attribute values. The ``>`` character never needs escaping
        and is left alone.

        >>> escape('"1 < 2" & 3 > 2')
        <Markup '&quot;1 &lt; 2&quot; &amp; 3 > 2'>
        >>> escape('"1 < 2"', quotes=False)
        <Markup '"1 &lt; 2"'>

        Values that are not strings are converted first; ``0`` is a value like
        any other:

        >>> escape(0)
        <Markup '0'>
        """
        if type(text) is cls:
            return text
        text = str(text).replace('&', '&amp;').replace('<', '&lt;')
        if quotes:
            text = text.replace('"', '&quot;')
        return cls(text)

    def unescape(self):
        """Reverse-escapes &, < and \" and returns a `str` object.

        >>> Markup('&quot;1 &lt; 2&quot; &amp; 3').unescape()
        '"1 < 2" & 3'
        """
        if not self:
            return ''
        return str(self).replace('&quot;', '"') \
                        .replace('&lt;', '<') \
                        .replace('&amp;', '&')


escape = Markup.escape

def unescape(text):
    """Reverse-escapes &, < and \" and returns a `str` object.

    Only `Markup` instances are unescaped; plain strings are returned as is.
    """
    if not isinstance(text, Markup):
        return text
    return text.unescape()


# Printable ASCII minus the characters that are unsafe in a system literal.
# Everything else (controls, space, DEL and non-ASCII) is percent-encoded.
_URI_SAFE = ''.join([chr(c) for c in range(0x21, 0x7f)
                     if chr(c) not in '<>"{}|\\^`'])

def escape_uri(uri):
    """Percent-encode the characters of a URI that may not appear in a
    DOCTYPE system identifier.

    >>> escape_uri('http://example.com/my dtds/{v2}.dtd')
    'http://example.com/my%20dtds/%7Bv2%7D.dtd'

    Non-ASCII characters are encoded as their UTF-8 bytes, while an existing
    ``%`` is left as is:

    >>> escape_uri('http://example.com/caf\\xe9%20.dtd')
    'http://example.com/caf%C3%A9%20.dtd'
    """
    return quote(str(uri), safe=_URI_SAFE)
