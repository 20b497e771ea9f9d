import textwrap
from io import StringIO

from timetally.core.analysis import TimeLog


def make_timelog(text='', top_level=False):
    return TimeLog(StringIO(textwrap.dedent(text)), top_level=top_level)
