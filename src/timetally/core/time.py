import datetime

from timetally.core.utils import monday, week_of


class Window(object):
    """A window into a time log.

    Intervals are clipped to the window before being counted.  The window
    includes min_timestamp but excludes max_timestamp.  Either bound may be
    None, which leaves that side of the window open.
    """

    def __init__(self, min_timestamp=None, max_timestamp=None):
        self.min_timestamp = min_timestamp
        self.max_timestamp = max_timestamp

    def __repr__(self):
        return '<Window: {}..{}>'.format(self.min_timestamp or '',
                                         self.max_timestamp or '')

    def __eq__(self, other):
        if not isinstance(other, Window):
            return NotImplemented
        return ((self.min_timestamp, self.max_timestamp)
                == (other.min_timestamp, other.max_timestamp))

    __hash__ = None

    @classmethod
    def for_date_range(cls, minimum, maximum):
        """Return a Window for the specified dates.

        ``minimum`` and ``maximum`` should be datetime.date instances (or
        None).  The interval is half-open: the day ``maximum`` itself is
        not included.
        """
        if minimum is not None:
            minimum = datetime.datetime.combine(minimum, datetime.time())
        if maximum is not None:
            maximum = datetime.datetime.combine(maximum, datetime.time())
        return cls(minimum, maximum)

    @classmethod
    def for_week(cls, year, week):
        """Return a Window for an ISO week, Monday to Monday."""
        first = monday(year, week)
        return cls.for_date_range(first, first + datetime.timedelta(7))

    @classmethod
    def for_date_week(cls, date):
        """Return a Window for the week that contains date."""
        return cls.for_week(*week_of(date))

    def clip(self, start, stop):
        """Fit the interval from start to stop into the window.

        Returns a (start, stop) tuple, or None if nothing is left of the
        interval (including intervals that were reversed to begin with).
        A zero-length interval is not empty.
        """
        if self.min_timestamp is not None and start < self.min_timestamp:
            start = self.min_timestamp
        if self.max_timestamp is not None and stop > self.max_timestamp:
            stop = self.max_timestamp
        if start > stop:
            return None
        return start, stop
