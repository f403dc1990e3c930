
# Imports from standard library
import logging
import os
from pathlib import Path
from typing import Iterator, Sequence, Union

# Local imports
from .bases import APPLICATIONS_DIR, DESKTOP_SUFFIX, RankedPath

_logger = logging.getLogger(__name__)


def walk_data_dirs(
        data_dirs: Sequence[Union[str, Path]]) -> Iterator[RankedPath]:
    '''Yield (rank, path) for each desktop file found directly
    in the 'applications' folder of each data dir.
    rank is the position of the data dir in data_dirs.'''
    for rank, data_dir in enumerate(data_dirs):
        apps_dir = os.path.abspath(os.path.join(data_dir, APPLICATIONS_DIR))

        try:
            dir_entries = os.scandir(apps_dir)
        except OSError as e:
            # applications folder doesn't exists or is not readable
            _logger.debug(f'skip {apps_dir}: {e}')
            continue

        with dir_entries:
            try:
                for entry in dir_entries:
                    if not entry.name.endswith(DESKTOP_SUFFIX):
                        continue

                    try:
                        if entry.is_dir():
                            continue
                    except OSError:
                        continue

                    yield (rank, os.path.join(apps_dir, entry.name))
            except OSError as e:
                _logger.debug(f'listing of {apps_dir} interrupted: {e}')
