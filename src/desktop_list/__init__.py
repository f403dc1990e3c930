
VERSION = "0.1.0"

from .bases import (
    APPLICATIONS_DIR,
    DESKTOP_SUFFIX,
    DEFAULT_WORKERS,
    ApplicationEntry,
    Classification,
    FileFailure,
    ScanResult)
from .entry_parser import parse_entry, normalize_command, classify
from .walker import walk_data_dirs
from .dispatcher import Dispatcher
from .ordering import deduplicate
from .finder import find_applications
