import collections


class ProjectTotals(object):
    """Time spent per project, in milliseconds.

    Iterating yields project names in sorted order, so reports built from
    the totals come out the same every time.
    """

    def __init__(self):
        self._totals = {}

    def __repr__(self):
        return '<ProjectTotals: %s>' % dict(self.totals())

    def __len__(self):
        return len(self._totals)

    def __iter__(self):
        return iter(sorted(self._totals))

    def __contains__(self, project):
        return project in self._totals

    def __getitem__(self, project):
        return self._totals[project]

    def items(self):
        return self.totals().items()

    @classmethod
    def from_durations(cls, durations):
        """Build totals from an iterable of (project, millis) pairs."""
        totals = cls()
        for project, millis in durations:
            totals.accumulate(project, millis)
        return totals

    def accumulate(self, project, millis):
        """Add millis to the total of project."""
        if millis < 0:
            raise ValueError('negative duration for %r: %d' % (project, millis))
        self._totals[project] = self._totals.get(project, 0) + millis

    def include(self, projects):
        """Make sure every one of projects has a total, even if zero."""
        for project in projects:
            self.accumulate(project, 0)

    def merge(self, other):
        """Add the totals of another ProjectTotals to this one."""
        for project, millis in other._totals.items():
            self.accumulate(project, millis)

    def totals(self):
        """Return an OrderedDict of {project: millis}, sorted by project."""
        return collections.OrderedDict(
            (project, self._totals[project]) for project in self)

    def grand_total(self):
        """Return the sum of all totals."""
        return sum(self._totals.values())
