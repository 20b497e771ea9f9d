"""
Parsing of individual log lines

Two layouts of log lines are in use:

    <start>,<stop>,<project>[,<subproject>...]      (new)
    <project>,<subproject>,<start>,<stop>           (old)

Whitespace around commas is ignored.  The layout of a line is detected by
trying to parse its first field as a date.
"""

import collections
import re

from timetally.core.errors import MalformedEntry
from timetally.core.utils import parse_timestamp


Entry = collections.namedtuple('Entry', 'start stop project')

field_separator_rx = re.compile(r'\s*,\s*')


def split_fields(line, maxsplit):
    """Split a log line into at most maxsplit + 1 comma-separated fields."""
    return field_separator_rx.split(line.strip(), maxsplit)


def top_level_project(project):
    """Strip subprojects from a project path."""
    return split_fields(project, 1)[0]


class NewLayout(object):
    """start, stop, project[, subproject...]

    The project is the whole remainder of the line after the two dates,
    subprojects included, unless top_level is requested.
    """

    @staticmethod
    def try_parse(line, top_level=False):
        fields = split_fields(line, 2)
        try:
            start = parse_timestamp(fields[0])
        except ValueError:
            return None
        if len(fields) < 3:
            raise ValueError('missing project: %r' % line)
        stop = parse_timestamp(fields[1])
        project = fields[2]
        if top_level:
            project = top_level_project(project)
        return Entry(start, stop, project)


class OldLayout(object):
    """project, subproject, start, stop

    The subproject is never part of the result.
    """

    @staticmethod
    def try_parse(line, top_level=False):
        fields = split_fields(line, 3)
        if len(fields) < 4:
            return None
        project, subproject, start, stop = fields
        try:
            return Entry(parse_timestamp(start), parse_timestamp(stop), project)
        except ValueError:
            return None


# Order matters: the first layout that recognizes a line wins.
LAYOUTS = (NewLayout, OldLayout)


def parse_entry(line, top_level=False, lineno=None):
    """Parse a log line into an Entry.

    Raises MalformedEntry if no layout yields two valid dates.
    """
    for layout in LAYOUTS:
        try:
            entry = layout.try_parse(line, top_level=top_level)
        except ValueError:
            break
        if entry is not None:
            return entry
    raise MalformedEntry(line.rstrip('\r\n'), lineno)
