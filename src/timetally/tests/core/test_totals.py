import unittest
from collections import OrderedDict

from timetally.core.totals import ProjectTotals


class TestProjectTotals(unittest.TestCase):

    def test_empty(self):
        totals = ProjectTotals()
        self.assertEqual(len(totals), 0)
        self.assertEqual(totals.totals(), OrderedDict())
        self.assertEqual(totals.grand_total(), 0)

    def test_accumulate(self):
        totals = ProjectTotals()
        totals.accumulate('ProjectA', 1000)
        totals.accumulate('ProjectA', 500)
        totals.accumulate('ProjectB', 0)
        self.assertEqual(totals['ProjectA'], 1500)
        self.assertEqual(totals['ProjectB'], 0)
        self.assertEqual(totals.grand_total(), 1500)

    def test_accumulate_negative(self):
        totals = ProjectTotals()
        self.assertRaises(ValueError, totals.accumulate, 'ProjectA', -1)
        self.assertNotIn('ProjectA', totals)

    def test_sorted_by_project(self):
        totals = ProjectTotals()
        for project in ['beta', 'Gamma', 'alpha', 'Alpha']:
            totals.accumulate(project, 1)
        self.assertEqual(list(totals), ['Alpha', 'Gamma', 'alpha', 'beta'])
        self.assertEqual(list(totals.totals()), ['Alpha', 'Gamma', 'alpha', 'beta'])

    def test_keys_are_not_normalized(self):
        totals = ProjectTotals()
        totals.accumulate('Project', 1)
        totals.accumulate('project', 2)
        self.assertEqual(dict(totals.items()), {'Project': 1, 'project': 2})

    def test_include(self):
        totals = ProjectTotals()
        totals.accumulate('ProjectA', 1000)
        totals.include(['ProjectA', 'ProjectZ'])
        self.assertEqual(totals.totals(),
                         OrderedDict([('ProjectA', 1000), ('ProjectZ', 0)]))

    def test_merge(self):
        one = ProjectTotals.from_durations([('a', 1), ('b', 2)])
        two = ProjectTotals.from_durations([('b', 3), ('c', 4)])
        one.merge(two)
        self.assertEqual(one.totals(),
                         OrderedDict([('a', 1), ('b', 5), ('c', 4)]))
        self.assertEqual(two.totals(), OrderedDict([('b', 3), ('c', 4)]))

    def test_from_durations(self):
        totals = ProjectTotals.from_durations([('a', 1), ('a', 2), ('b', 0)])
        self.assertEqual(totals.totals(), OrderedDict([('a', 3), ('b', 0)]))

    def test_repr(self):
        totals = ProjectTotals.from_durations([('a', 1)])
        self.assertEqual(repr(totals), "<ProjectTotals: {'a': 1}>")
