"""Tests for timetally"""
import unittest

from timetally.tests import test_main, test_settings
from timetally.tests.core import (
    test_analysis,
    test_entries,
    test_exports,
    test_reports,
    test_time,
    test_totals,
    test_utils,
)


def test_suite():
    modules = [
        test_utils,
        test_entries,
        test_time,
        test_totals,
        test_reports,
        test_exports,
        test_analysis,
        test_settings,
        test_main,
    ]
    suites = []
    for module in modules:
        suites.append(unittest.defaultTestLoader.loadTestsFromModule(module))
        if hasattr(module, 'additional_tests'):
            suites.append(module.additional_tests())
    return unittest.TestSuite(suites)


def main():
    unittest.main(module='timetally.tests', defaultTest='test_suite')
