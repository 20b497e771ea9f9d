"""
Exceptions raised by the log analyser
"""


class MalformedEntry(ValueError):
    """A log line that could not be parsed under either layout."""

    def __init__(self, line, lineno=None):
        self.line = line
        self.lineno = lineno
        super(MalformedEntry, self).__init__(line, lineno)

    def __str__(self):
        if self.lineno is None:
            return 'Could not process log entry: "%s"' % self.line
        return 'Could not process log entry on line %d: "%s"' % (
            self.lineno, self.line)


class UnreadableFile(IOError):
    """The log file could not be opened or decoded."""

    def __init__(self, filename, error):
        super(UnreadableFile, self).__init__(
            'Could not read %s: %s' % (filename, error))
        self.filename = filename
        self.error = error

    def __str__(self):
        # OSError.__str__ shows errno and filename once filename is set
        return self.args[0]


class InsufficientData(ValueError):
    """A relative report was requested but no time has been logged."""
