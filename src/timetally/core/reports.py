from timetally.core.errors import InsufficientData
from timetally.core.utils import format_hours, round_half_up


class Reports(object):
    """Generation of reports.

    Every line of a report looks like

        <team>, <value>, <project>

    where value is either the number of hours spent on the project

        | Kernel team, 12.50, Compass
        | Kernel team, 3.25, Overhead

    or its share of the total time logged

        | Kernel team, 79%, Compass
        | Kernel team, 21%, Overhead

    Projects are listed in alphabetical order.  The team is whatever
    the configuration says it is.
    """

    def __init__(self, totals, team):
        self.totals = totals
        self.team = team

    def absolute_lines(self):
        """Return report lines with the hours spent on each project."""
        return ['%s, %s, %s' % (self.team, format_hours(millis), project)
                for project, millis in self.totals.items()]

    def relative_lines(self):
        """Return report lines with the percentage spent on each project.

        Raises InsufficientData if no time was logged at all.
        """
        total = self.totals.grand_total()
        if not total:
            raise InsufficientData('Cannot report shares with no logged hours.')
        return ['%s, %d%%, %s' % (self.team,
                                  round_half_up(100.0 * millis / total),
                                  project)
                for project, millis in self.totals.items()]

    def lines(self, relative=False):
        if relative:
            return self.relative_lines()
        else:
            return self.absolute_lines()

    def report(self, output, relative=False):
        """Write the report to output, one line per project."""
        # Build the lines first so that InsufficientData leaves output alone.
        for line in self.lines(relative):
            output.write(line + '\n')

    def to_file(self, filename, relative=False):
        """Write the report to a file."""
        lines = self.lines(relative)
        with open(filename, 'w', encoding='UTF-8') as f:
            for line in lines:
                f.write(line + '\n')
