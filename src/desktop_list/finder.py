
# Imports from standard library
import logging
from pathlib import Path
from typing import Sequence, Union

# Local imports
from .bases import DEFAULT_WORKERS, ScanResult
from .dispatcher import Dispatcher
from .ordering import deduplicate
from .walker import walk_data_dirs

_logger = logging.getLogger(__name__)


def find_applications(
        data_dirs: Sequence[Union[str, Path]],
        workers: int = DEFAULT_WORKERS) -> ScanResult:
    '''Scan the 'applications' folder of each data dir
    and return the displayable applications, without duplicates,
    sorted by data dir priority and name.

    The first data dir has the highest priority.'''
    if not data_dirs:
        raise ValueError('no data dir to scan')

    dispatcher = Dispatcher(workers)
    entries = deduplicate(dispatcher.run(walk_data_dirs(data_dirs)))

    _logger.info(
        f'{len(entries)} applications found in {len(data_dirs)} data dirs')

    return ScanResult(entries=entries, failures=list(dispatcher.failures))
