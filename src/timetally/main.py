"""
Command line interface: sum up time spent per project
"""

import argparse
import datetime
import logging
import sys

from timetally import DEBUG, __version__
from timetally.core.analysis import TimeLog
from timetally.core.errors import InsufficientData, MalformedEntry, UnreadableFile
from timetally.core.exports import Exports
from timetally.core.reports import Reports
from timetally.core.time import Window
from timetally.core.utils import parse_date, timesheet_filename, week_of
from timetally.settings import Settings


log = logging.getLogger('timetally')


def date_arg(value):
    try:
        return parse_date(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            'dates should be specified in the following format: dd/mm/yyyy')


def week_arg(value):
    year, sep, week = value.partition('/')
    try:
        year, week = int(year), int(week)
        datetime.date.fromisocalendar(year, week, 1)
    except ValueError:
        raise argparse.ArgumentTypeError(
            'weeks should be specified as YEAR/WEEK, e.g. 2024/7')
    return year, week


parser = argparse.ArgumentParser(
    prog='timetally',
    description="sum up time spent per project in a time log")
parser.add_argument(
    'from_date', nargs='?', type=date_arg, metavar='FROM',
    help='start date, inclusive (dd/mm/yyyy)')
parser.add_argument(
    'to_date', nargs='?', type=date_arg, metavar='TO',
    help='stop date, exclusive (dd/mm/yyyy)')
parser.add_argument(
    '-f', '--file', dest='logfile',
    help='the time log to analyse (default: from the configuration)')
parser.add_argument(
    '-c', '--config',
    help="the configuration file (default: ~/.config/timetally/timetallyrc)")
parser.add_argument(
    '--team', help='label for report lines (default: from the configuration)')
weeks = parser.add_mutually_exclusive_group()
weeks.add_argument(
    '--week', type=week_arg, metavar='YEAR/WEEK',
    help='report on an ISO week')
weeks.add_argument(
    '--this-week', action='store_true', help='report on the current week')
weeks.add_argument(
    '--last-week', action='store_true', help='report on the previous week')
parser.add_argument(
    '-r', '--relative', action='store_true',
    help='report percentages of the total instead of hours')
parser.add_argument(
    '--csv', action='store_true',
    help='export hours and percentages as CSV')
parser.add_argument(
    '--top-level', action='store_true',
    help='count subprojects towards their top-level project')
parser.add_argument(
    '--all-projects', action='store_true',
    help='also list the configured projects that have no time logged')
parser.add_argument(
    '--strict', action='store_true',
    help='stop at the first malformed line instead of skipping it')
output_group = parser.add_mutually_exclusive_group()
output_group.add_argument(
    '-o', '--output', metavar='FILE', help='write the report to FILE')
output_group.add_argument(
    '--save', action='store_true',
    help='write the report to a file named after the reported period')
parser.add_argument(
    '--debug', action='store_true', help='show debug messages')
parser.add_argument(
    '--version', action='version', version='%(prog)s ' + __version__)


def setup_logging(debug=False):
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        root_logger.addHandler(logging.StreamHandler())
    if debug:
        root_logger.setLevel(logging.DEBUG)
    else:
        root_logger.setLevel(logging.INFO)


def get_window(args):
    """Pick the reported period from command line arguments.

    Returns a tuple (window, week); week is (year, week) or None.
    """
    if (args.from_date is None) != (args.to_date is None):
        parser.error('both FROM and TO dates are needed')
    week = None
    if args.week:
        week = args.week
    elif args.this_week:
        week = week_of(datetime.date.today())
    elif args.last_week:
        week = week_of(datetime.date.today() - datetime.timedelta(7))
    if week is not None:
        if args.from_date is not None:
            parser.error('specify either dates or a week, not both')
        return Window.for_week(*week), week
    return Window.for_date_range(args.from_date, args.to_date), None


def main(argv=None):
    args = parser.parse_args(argv)
    setup_logging(args.debug or DEBUG)
    window, week = get_window(args)

    settings = Settings()
    settings.load(args.config)
    team = args.team or settings.team
    relative = args.relative or settings.relative
    top_level = args.top_level or settings.top_level
    logfile = args.logfile or settings.get_timelog_file()

    log.debug('analysing %s for %r', logfile, window)

    timelog = TimeLog(logfile, top_level=top_level)
    try:
        totals = timelog.analyze(window, strict=args.strict)
    except (UnreadableFile, MalformedEntry) as e:
        sys.exit(str(e))
    if timelog.errors:
        log.warning('Skipped %d malformed line%s', len(timelog.errors),
                    len(timelog.errors) != 1 and "s" or "")
    if args.all_projects:
        totals.include(settings.projects)

    filename = args.output
    if args.save:
        filename = timesheet_filename(window, week)
    reports = Reports(totals, team)
    try:
        if args.csv and filename:
            with open(filename, 'w', encoding='UTF-8', newline='') as f:
                Exports(totals).to_csv(f)
        elif args.csv:
            Exports(totals).to_csv(sys.stdout)
        elif filename:
            reports.to_file(filename, relative=relative)
        else:
            reports.report(sys.stdout, relative=relative)
    except InsufficientData as e:
        sys.exit(str(e))
    except IOError as e:
        sys.exit("Could not write %s: %s" % (filename, e))
    if filename:
        log.info('Report saved to %s', filename)


if __name__ == '__main__':
    main()
