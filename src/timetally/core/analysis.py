import logging
import re

from timetally.core.entries import parse_entry
from timetally.core.errors import MalformedEntry, UnreadableFile
from timetally.core.time import Window
from timetally.core.totals import ProjectTotals
from timetally.core.utils import as_millis


log = logging.getLogger('timetally')

# Only CR, LF and CRLF end a line; form feeds and the like are line content.
line_break_rx = re.compile(r'\r\n|\r|\n')


def split_lines(text):
    """Split text into lines, dropping a trailing line break."""
    lines = line_break_rx.split(text)
    if lines and lines[-1] == '':
        lines.pop()
    return lines


class TimeLog(object):
    """Time log.

    A time log is a text file with one activity interval per line.  See
    timetally.core.entries for the layout of the lines.
    """

    def __init__(self, filename, top_level=False):
        self.filename = filename
        self.top_level = top_level
        self.errors = []

    def __repr__(self):
        return '<TimeLog: %s>' % getattr(self.filename, 'name', self.filename)

    def read_lines(self):
        """Read the log file.

        Returns a list of lines.  Raises UnreadableFile if the file cannot
        be opened or is not valid UTF-8.
        """
        if hasattr(self.filename, 'read'):
            # accept any file-like object
            # this is a hook for unit tests, really
            self.filename.seek(0)
            return split_lines(self.filename.read())
        log.debug('reading %s', self.filename)
        try:
            with open(self.filename, 'rb') as f:
                data = f.read()
            return split_lines(data.decode('UTF-8'))
        except (IOError, UnicodeDecodeError) as e:
            raise UnreadableFile(self.filename, e)

    def numbered_lines(self):
        """Iterate over (lineno, line) for non-blank lines.

        Line numbers start at 1 and count blank lines too.
        """
        for lineno, line in enumerate(self.read_lines(), 1):
            if line.strip():
                yield lineno, line

    def entries(self):
        """Iterate over the entries of the log.

        Yields (lineno, Entry) tuples.  Malformed lines raise MalformedEntry.
        """
        for lineno, line in self.numbered_lines():
            yield lineno, parse_entry(line, self.top_level, lineno)

    def analyze(self, window=None, strict=False):
        """Sum up time spent per project within window.

        Returns a ProjectTotals.  Intervals are clipped to the window;
        intervals that end up empty or reversed are ignored.

        Malformed lines are logged, collected in self.errors and skipped,
        unless ``strict`` is true, in which case the first one is raised.
        """
        if window is None:
            window = Window()
        self.errors = []
        totals = ProjectTotals()
        for lineno, line in self.numbered_lines():
            try:
                entry = parse_entry(line, self.top_level, lineno)
            except MalformedEntry as e:
                if strict:
                    raise
                log.warning('%s', e)
                self.errors.append(e)
                continue
            interval = window.clip(entry.start, entry.stop)
            if interval is None:
                continue
            start, stop = interval
            totals.accumulate(entry.project, as_millis(stop - start))
        log.debug('%d projects, %d malformed lines in %r',
                  len(totals), len(self.errors), self)
        return totals


def analyze(filename, window=None, strict=False, top_level=False):
    """Sum up time spent per project in a log file.

    See TimeLog.analyze().
    """
    return TimeLog(filename, top_level=top_level).analyze(window, strict)
