import csv

from timetally.core.utils import format_hours


class Exports(object):
    """Exporting of project totals."""

    def __init__(self, totals):
        self.totals = totals

    def to_csv(self, output, title_row=True):
        """Export project totals to a CSV file.

        The file has three columns: project, time (in decimal hours), and
        share of the total time (in percent, left empty if nothing was
        logged).
        """
        writer = csv.writer(output)
        if title_row:
            writer.writerow(["project", "time (hours)", "share (%)"])
        total = self.totals.grand_total()
        for project, millis in self.totals.items():
            if total:
                share = '%.1f' % (100.0 * millis / total)
            else:
                share = ''
            writer.writerow([project, format_hours(millis), share])
