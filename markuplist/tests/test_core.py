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

import doctest
import pickle
import unittest

from markuplist import core
from markuplist.core import Markup, escape, escape_uri, unescape


class MarkupTestCase(unittest.TestCase):

    def test_repr(self):
        markup = Markup('foo')
        self.assertEqual("<Markup 'foo'>", repr(markup))

    def test_escape(self):
        markup = escape('<b>"&"</b>')
        assert type(markup) is Markup
        self.assertEqual('&lt;b>&quot;&amp;&quot;&lt;/b>', markup)

    def test_escape_noquotes(self):
        markup = escape('<b>"&"</b>', quotes=False)
        assert type(markup) is Markup
        self.assertEqual('&lt;b>"&amp;"&lt;/b>', markup)

    def test_escape_leaves_gt(self):
        self.assertEqual('a > b', escape('a > b'))

    def test_escape_markup_unchanged(self):
        markup = Markup('<b>&amp;</b>')
        self.assertIs(markup, escape(markup))

    def test_escape_zero(self):
        self.assertEqual('0', escape(0))

    def test_escape_empty(self):
        markup = escape('')
        assert type(markup) is Markup
        self.assertEqual('', markup)

    def test_unescape_markup(self):
        string = '<b>"&"</b>'
        markup = Markup.escape(string)
        assert type(markup) is Markup
        self.assertEqual(string, unescape(markup))

    def test_unescape_plain_string(self):
        self.assertEqual('&amp;', unescape('&amp;'))

    def test_add_str(self):
        markup = Markup('<b>foo</b>') + '<br/>'
        assert type(markup) is Markup
        self.assertEqual('<b>foo</b>&lt;br/>', markup)

    def test_add_markup(self):
        markup = Markup('<b>foo</b>') + Markup('<br/>')
        assert type(markup) is Markup
        self.assertEqual('<b>foo</b><br/>', markup)

    def test_add_reverse(self):
        markup = '<br/>' + Markup('<b>bar</b>')
        assert type(markup) is Markup
        self.assertEqual('&lt;br/><b>bar</b>', markup)

    def test_html_protocol(self):
        markup = Markup('<b>x</b>')
        self.assertIs(markup, markup.__html__())

    def test_pickle(self):
        markup = Markup('foo')
        buf = pickle.dumps(markup, 2)
        self.assertEqual(markup, pickle.loads(buf))
        self.assertIs(Markup, type(pickle.loads(buf)))


class EscapeURITestCase(unittest.TestCase):

    def test_plain_url(self):
        url = 'http://www.w3.org/TR/html4/strict.dtd'
        self.assertEqual(url, escape_uri(url))

    def test_unsafe_ascii(self):
        self.assertEqual('%3C%3E%22%7B%7D%7C%5C%5E%60',
                         escape_uri('<>"{}|\\^`'))

    def test_control_and_space(self):
        self.assertEqual('a%00b%1Fc%20d%7F', escape_uri('a\x00b\x1fc d\x7f'))

    def test_non_ascii(self):
        self.assertEqual('%C3%BC', escape_uri('ü'))

    def test_percent_kept(self):
        self.assertEqual('a%20b', escape_uri('a%20b'))

    def test_reserved_kept(self):
        uri = "http://u:p@example.com/a;b?c=d&e=f#g+h,i!j*k'l(m)n$o~p"
        self.assertEqual(uri, escape_uri(uri))


def suite():
    suite = unittest.TestSuite()
    suite.addTest(unittest.defaultTestLoader.loadTestsFromTestCase(MarkupTestCase))
    suite.addTest(unittest.defaultTestLoader.loadTestsFromTestCase(EscapeURITestCase))
    suite.addTest(doctest.DocTestSuite(core))
    return suite

if __name__ == '__main__':
    unittest.main(defaultTest='suite')
