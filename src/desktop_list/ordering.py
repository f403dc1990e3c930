
# Imports from standard library
from typing import Iterable

# Local imports
from .bases import ApplicationEntry


def _has_priority(entry: ApplicationEntry, kept: ApplicationEntry) -> bool:
    if entry.source_rank != kept.source_rank:
        return entry.source_rank < kept.source_rank

    # same name in two data dirs with the same rank,
    # keep the result stable between runs.
    return entry.file_path < kept.file_path

def deduplicate(entries: Iterable[ApplicationEntry]) -> list[ApplicationEntry]:
    '''Keep one entry per logical name, the one from the data dir
    with the lowest rank, and sort them by rank and then by name.

    entries is consumed entirely before anything is returned.'''
    kept = dict[str, ApplicationEntry]()

    for entry in entries:
        kept_entry = kept.get(entry.logical_name)
        if kept_entry is None or _has_priority(entry, kept_entry):
            kept[entry.logical_name] = entry

    return sorted(
        kept.values(), key=lambda e: (e.source_rank, e.logical_name))
