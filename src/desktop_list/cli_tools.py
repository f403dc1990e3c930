
# Imports from standard library
import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

# Local imports
from . import VERSION
from .settings import APP_NAME

PACKAGE_NAME = __package__

class CommandLineArgs(argparse.Namespace):
    workers: Optional[int] = None
    data_dirs: Optional[str] = None
    include_data_home = False
    config_dir: Optional[Path] = None
    debug = False
    log = ''

    @classmethod
    def eat_attributes(cls, parsed_args: argparse.Namespace):
        for attr_name in dir(parsed_args):
            if not attr_name.startswith('_'):
                setattr(cls, attr_name, getattr(parsed_args, attr_name))


def positive_int_arg(arg: str) -> int:
    try:
        value = int(arg)
    except ValueError:
        raise argparse.ArgumentTypeError(f'{arg!r} is not an integer')

    if value < 1:
        raise argparse.ArgumentTypeError(f'{arg} is not a positive integer')
    return value


class ArgParser(argparse.ArgumentParser):
    def __init__(self, args: Optional[Sequence[str]] = None):
        argparse.ArgumentParser.__init__(
            self, prog=APP_NAME,
            description='list the displayable applications '
                        'of the XDG data dirs, one per line: '
                        'category, name and command separated by tabs')

        self.add_argument(
            '--workers', '-w', type=positive_int_arg, default=None,
            help='number of threads parsing desktop files')
        self.add_argument(
            '--data-dirs', '-D', type=str, default=None,
            help='colon separated data dirs, replaces $XDG_DATA_DIRS')
        self.add_argument(
            '--include-data-home', action='store_true',
            help='also scan $XDG_DATA_HOME, with the highest priority')
        self.add_argument(
            '--config-dir', '-c', type=Path, default=None,
            help='use a custom config dir')
        self.add_argument(
            '--debug', '-d', action='store_true',
            help='log everything')
        self.add_argument(
            '-log', '--log', type=str, default='',
            help='set debug logs for specific modules, colon separated')
        self.add_argument(
            '-v', '--version', action='version', version=VERSION)

        parsed_args = argparse.ArgumentParser.parse_args(self, args)
        CommandLineArgs.eat_attributes(parsed_args)


class LogStreamHandler(logging.StreamHandler):
    '''stderr handler with the log format of the program.'''

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.setFormatter(logging.Formatter(
            "%(levelname)s:%(name)s - %(message)s"))


def module_logger_name(module: str) -> str:
    if module in (PACKAGE_NAME, APP_NAME):
        return PACKAGE_NAME
    if module.startswith(f'{PACKAGE_NAME}.'):
        return module
    return f'{PACKAGE_NAME}.{module}'

def set_log_levels(debug=False, log=''):
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        return

    for module in log.split(':'):
        if not module:
            continue
        logging.getLogger(module_logger_name(module)).setLevel(logging.DEBUG)
