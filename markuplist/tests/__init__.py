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
import unittest

def suite():
    import markuplist
    from markuplist.tests import test_builder, test_core, test_output

    suite = unittest.TestSuite()
    suite.addTest(doctest.DocTestSuite(markuplist))
    suite.addTest(test_builder.suite())
    suite.addTest(test_core.suite())
    suite.addTest(test_output.suite())
    return suite

if __name__ == '__main__':
    unittest.main(defaultTest='suite')
