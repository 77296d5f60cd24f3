import unittest
import doctest

import compose
import memoization
import query
import selection
import test_utils
import tracing
import utils


def load_tests(loader, tests, ignore):
    # Test the docstrings inside our actual codebase
    tests.addTests(doctest.DocTestSuite(utils))
    tests.addTests(doctest.DocTestSuite(query))
    tests.addTests(doctest.DocTestSuite(memoization))
    tests.addTests(doctest.DocTestSuite(selection))
    tests.addTests(doctest.DocTestSuite(tracing))
    tests.addTests(doctest.DocTestSuite(compose))
    tests.addTests(doctest.DocTestSuite(test_utils))

    # Some tests in the doctests style are too large to nicely fit into a docstring; better to keep them separate:
    tests.addTests(doctest.DocFileSuite("doctests/caching.txt"))
    tests.addTests(doctest.DocFileSuite("doctests/online_users.txt"))
    tests.addTests(doctest.DocFileSuite("doctests/wrappers.txt"))
    tests.addTests(doctest.DocFileSuite("doctests/failures.txt"))

    return tests


if __name__ == '__main__':
    unittest.main()
