"""
Settings for timetally
"""

import os
from configparser import RawConfigParser


default_config_home = os.path.normpath('~/.config')
default_data_home = os.path.normpath('~/.local/share')


class Settings(object):
    """Configurable settings for timetally."""

    # Insane defaults
    team = 'Anonymous'
    logfile = ''  # empty means get_timelog_file()

    relative = False
    top_level = False
    projects = ()  # always listed in reports, even if no time was logged

    def check_home(self):
        envar_home = os.environ.get('TIMETALLY_HOME')
        if envar_home is not None:
            return os.path.expanduser(envar_home)
        return None

    # http://standards.freedesktop.org/basedir-spec/basedir-spec-latest.html

    def get_config_dir(self):
        home = self.check_home()
        if home:
            return home
        xdg = os.environ.get('XDG_CONFIG_HOME') or default_config_home
        return os.path.join(os.path.expanduser(xdg), 'timetally')

    def get_data_dir(self):
        home = self.check_home()
        if home:
            return home
        xdg = os.environ.get('XDG_DATA_HOME') or default_data_home
        return os.path.join(os.path.expanduser(xdg), 'timetally')

    def get_config_file(self):
        return os.path.join(self.get_config_dir(), 'timetallyrc')

    def get_timelog_file(self):
        if self.logfile:
            return os.path.expanduser(self.logfile)
        return os.path.join(self.get_data_dir(), 'timelog.txt')

    def _config(self):
        config = RawConfigParser()
        config.add_section('timetally')
        config.set('timetally', 'team', self.team)
        config.set('timetally', 'logfile', self.logfile)
        config.set('timetally', 'relative', str(self.relative))
        config.set('timetally', 'top_level', str(self.top_level))
        config.set('timetally', 'projects', ', '.join(self.projects))
        return config

    def load(self, filename=None):
        if filename is None:
            filename = self.get_config_file()
        config = self._config()
        config.read([filename], encoding='UTF-8')
        self.team = config.get('timetally', 'team')
        self.logfile = config.get('timetally', 'logfile')
        self.relative = config.getboolean('timetally', 'relative')
        self.top_level = config.getboolean('timetally', 'top_level')
        self.projects = tuple(
            p.strip() for p in config.get('timetally', 'projects').split(',')
            if p.strip())

    def save(self, filename):
        config = self._config()
        with open(filename, 'w', encoding='UTF-8') as f:
            config.write(f)
