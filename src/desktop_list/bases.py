
# Imports from standard library
from dataclasses import dataclass, field
from typing import TypeAlias

APPLICATIONS_DIR = 'applications'
DESKTOP_SUFFIX = '.desktop'
DEFAULT_WORKERS = 8

# Type aliases
Rank: TypeAlias = int
'''index of the base data dir in the caller order, 0 is the most important'''

RankedPath: TypeAlias = tuple[Rank, str]
'''a desktop file path with the rank of the data dir containing it'''


@dataclass(frozen=True)
class Classification:
    user: bool = False
    '''desktop file is under a personal directory tree,
    it is a system one otherwise'''

    sandboxed: bool = False
    'desktop file is exported by a flatpak installation'

    def __str__(self) -> str:
        parts = ['user' if self.user else 'system']
        if self.sandboxed:
            parts.append('flatpak')
        return ' '.join(parts)


@dataclass(frozen=True)
class ApplicationEntry:
    source_rank: Rank
    file_path: str
    logical_name: str
    'desktop file base name without suffix, key for duplicates'
    display_command: str
    classification: Classification = field(default_factory=Classification)


@dataclass(frozen=True)
class FileFailure:
    file_path: str
    error: str


@dataclass
class ScanResult:
    entries: list[ApplicationEntry] = field(default_factory=list)
    failures: list[FileFailure] = field(default_factory=list)
