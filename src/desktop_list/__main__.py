#!/usr/bin/python3

# Standard lib imports
import logging
import sys
from typing import Optional, Sequence

# Local imports
from .cli_tools import (
    ArgParser, CommandLineArgs, LogStreamHandler, set_log_levels)
from .finder import find_applications
from .printer import print_entries
from .settings import ConfigError, load_settings, resolve_data_dirs

_logger = logging.getLogger(__name__)


def main(args: Optional[Sequence[str]] = None) -> int:
    ArgParser(args)

    # set logger handlers
    root_logger = logging.getLogger()
    if not any(isinstance(h, LogStreamHandler)
               for h in root_logger.handlers):
        root_logger.addHandler(LogStreamHandler())
    root_logger.setLevel(logging.WARNING)
    set_log_levels(CommandLineArgs.debug, CommandLineArgs.log)

    try:
        settings = load_settings(CommandLineArgs.config_dir)
        if CommandLineArgs.include_data_home:
            settings.include_data_home = True
        data_dirs = resolve_data_dirs(settings, CommandLineArgs.data_dirs)
    except ConfigError as e:
        sys.stderr.write(f'{e}\n')
        return 1

    workers = CommandLineArgs.workers or settings.workers
    _logger.debug(f'scan {[str(d) for d in data_dirs]} with {workers} workers')

    result = find_applications(data_dirs, workers)
    print_entries(result.entries)

    if result.failures:
        _logger.info(f'{len(result.failures)} desktop files unreadable')
    return 0


if __name__ == '__main__':
    sys.exit(main())
