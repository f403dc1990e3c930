
# Imports from standard library
import os
import re
from typing import Optional

# Local imports
from .bases import ApplicationEntry, Classification, DESKTOP_SUFFIX, Rank

# field codes are not expanded, arguments are never passed to the apps.
# https://specifications.freedesktop.org/desktop-entry-spec/latest/exec-variables.html
# '@@u' must stay before '@@'.
_field_codes_re = re.compile(r'%[fFuUdDnNickvm]|@@u|@@|\t')

USER_PREFIXES = ('/home',)
SANDBOX_MARKER = '/flatpak'


def _replace_field_code(match: re.Match) -> str:
    if match.group(0) == '\t':
        return ' '
    return ''

def normalize_command(command: str) -> str:
    '''remove field codes and escapes from an Exec value,
    and replace tabs with spaces, so the command fits in one
    tab separated field.'''
    return _field_codes_re.sub(_replace_field_code, command)

def user_prefixes() -> tuple[str, ...]:
    '''path prefixes of the personal directory trees:
    /home and the current user home dir when it can be found.'''
    home = os.path.expanduser('~').rstrip('/')
    if not home or not os.path.isabs(home) or home.startswith(USER_PREFIXES):
        return USER_PREFIXES
    return USER_PREFIXES + (home + '/',)

def classify(file_path: str,
             prefixes: tuple[str, ...] = USER_PREFIXES) -> Classification:
    return Classification(
        user=file_path.startswith(prefixes),
        sandboxed=SANDBOX_MARKER in file_path)

def logical_name(file_path: str) -> str:
    name = os.path.basename(file_path)
    if name.endswith(DESKTOP_SUFFIX):
        name = name[:-len(DESKTOP_SUFFIX)]
    return name

def parse_entry(
        file_path: str, rank: Rank,
        prefixes: tuple[str, ...] = USER_PREFIXES) -> Optional[ApplicationEntry]:
    '''Read the first group of a desktop file.

    Returns None if the file does not describe an application
    to display (hidden, terminal app, no Type=Application, no Exec).
    prefixes are the personal directory trees, see user_prefixes().
    Raises OSError if the file can not be read.'''
    is_application = False
    command = ''

    # undecodable bytes are kept as surrogates, printed back unchanged
    with open(file_path, 'r', encoding='utf-8',
              errors='surrogateescape') as file:
        for line in file:
            line = line.rstrip('\r\n')

            if line.startswith('NoDisplay=true'):
                return None
            if line.startswith('Terminal=true'):
                return None

            if line.startswith('Type=Application'):
                is_application = True
            elif line.startswith('Exec='):
                command = line.partition('=')[2]
            elif not line.strip():
                # only read first block
                break

    if not is_application or not command:
        return None

    name = logical_name(file_path)
    if not name:
        return None

    return ApplicationEntry(
        source_rank=rank,
        file_path=file_path,
        logical_name=name,
        display_command=normalize_command(command),
        classification=classify(file_path, prefixes))
