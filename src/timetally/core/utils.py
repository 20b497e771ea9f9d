import datetime
import math
import re


DATE_FORMAT = '%d/%m/%Y'

MILLIS_PER_HOUR = 60 * 60 * 1000

timestamp_rx = re.compile(r'(\d{1,2})/(\d{1,2})/(\d{4})'
                          r'(?:\s+(\d{1,2}):(\d\d)(?::(\d\d))?)?$')


def parse_timestamp(dt):
    """Parse a datetime instance from a 'dd/mm/yyyy [HH:MM[:SS]]' string.

    A missing time of day means midnight.
    """
    m = timestamp_rx.match(dt)
    if not m:
        raise ValueError('bad date: %r' % dt)
    day, month, year, hour, minute, second = m.groups()
    try:
        return datetime.datetime(int(year), int(month), int(day),
                                 int(hour or 0), int(minute or 0),
                                 int(second or 0))
    except ValueError:
        raise ValueError('bad date: %r' % dt)


def parse_date(d):
    """Parse a date instance from a 'dd/mm/yyyy' formatted string."""
    m = timestamp_rx.match(d)
    if not m or m.group(4) is not None:
        raise ValueError('bad date: %r' % d)
    return parse_timestamp(d).date()


def format_date(d):
    """Format a date (or datetime) as 'dd/mm/yyyy'."""
    return d.strftime(DATE_FORMAT)


def as_millis(duration):
    """Convert a datetime.timedelta to an integer number of milliseconds."""
    return ((duration.days * 24 * 60 * 60 + duration.seconds) * 1000
            + duration.microseconds // 1000)


def round_half_up(value):
    """Round to the nearest integer, halves going up.

    Python's round() rounds halves to even, which would make 12.5% and
    13.5% both come out as 12% and 14%.
    """
    return int(math.floor(value + 0.5))


def format_hours(millis):
    """Format a number of milliseconds as decimal hours with two digits.

    Halves are rounded up, in whole integers so that 0.125 hours does not
    come out as 0.12.
    """
    hundredths = (millis * 200 + MILLIS_PER_HOUR) // (2 * MILLIS_PER_HOUR)
    return '%d.%02d' % divmod(hundredths, 100)


def monday(year, week):
    """Return the Monday of an ISO week."""
    return datetime.date.fromisocalendar(year, week, 1)


def week_of(date):
    """Return (year, week) of the ISO week containing date."""
    return tuple(date.isocalendar()[:2])


def timesheet_filename(window, week=None):
    """Suggest a filename for saving a report about window.

    ``week`` is an optional (year, week) tuple; if given, the name mentions
    the week number rather than the dates.
    """
    if week is not None:
        return 'timesheet-%dwk%d.txt' % week
    if window.min_timestamp is None or window.max_timestamp is None:
        return 'timesheet.txt'
    return 'timesheet-%s-%s.txt' % (
        window.min_timestamp.strftime('%d%m%Y'),
        window.max_timestamp.strftime('%d%m%Y'))
