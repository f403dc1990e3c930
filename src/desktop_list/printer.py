
# Imports from standard library
import io
import sys
from typing import Iterable, Optional, TextIO

# Local imports
from .bases import ApplicationEntry


def format_entry(entry: ApplicationEntry) -> str:
    return (f'{entry.classification}\t{entry.logical_name}'
            f'\t{entry.display_command}')

def print_entries(entries: Iterable[ApplicationEntry],
                  file: Optional[TextIO] = None):
    if file is None:
        file = sys.stdout

    if isinstance(file, io.TextIOWrapper):
        # non UTF-8 bytes read from desktop files are written back as is
        file.reconfigure(errors='surrogateescape')

    for entry in entries:
        file.write(format_entry(entry) + '\n')
