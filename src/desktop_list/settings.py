
# Imports from standard library
from dataclasses import dataclass, field
import logging
import os
from pathlib import Path
from typing import Optional

# third party imports
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap
from ruamel.yaml.error import YAMLError
import xdg

# Local imports
from .bases import DEFAULT_WORKERS
from .yaml_tools import YamlMap

_logger = logging.getLogger(__name__)

APP_NAME = 'xdg-desktop-list'
CONFIG_FILE = 'config.yaml'
XDG_DATA_DIRS_ENV = 'XDG_DATA_DIRS'


class ConfigError(Exception):
    pass


@dataclass
class Settings:
    workers: int = DEFAULT_WORKERS
    'number of threads parsing desktop files'

    include_data_home: bool = False
    'scan $XDG_DATA_HOME before $XDG_DATA_DIRS'

    extra_data_dirs: list[str] = field(default_factory=list)
    'data dirs scanned after the XDG ones'


def default_config_dir() -> Path:
    return xdg.xdg_config_home() / APP_NAME

def load_settings(config_dir: Optional[Path] = None) -> Settings:
    '''Read config.yaml in config_dir (default in $XDG_CONFIG_HOME).
    A missing file gives default settings.'''
    if config_dir is None:
        config_dir = default_config_dir()

    settings = Settings()
    config_path = Path(config_dir) / CONFIG_FILE

    if not config_path.exists():
        _logger.debug(f'no config file at {config_path}')
        return settings

    try:
        with open(config_path, 'r') as f:
            contents = f.read()
        yaml = YAML()
        yaml_dict = yaml.load(contents)
    except (OSError, YAMLError) as e:
        raise ConfigError(f'unable to read config file {config_path}: {e}')

    if yaml_dict is None:
        return settings

    if not isinstance(yaml_dict, CommentedMap):
        _logger.warning(
            f'{config_path} does not contain a mapping, ignored')
        return settings

    ymap = YamlMap(yaml_dict)

    workers = ymap.int('workers', DEFAULT_WORKERS)
    if workers < 1:
        _logger.warning(
            f'invalid workers value {workers} in {config_path}, '
            f'using {DEFAULT_WORKERS}')
        workers = DEFAULT_WORKERS

    settings.workers = workers
    settings.include_data_home = ymap.bool('include_data_home', False)
    settings.extra_data_dirs = ymap.str_list('extra_data_dirs')
    return settings

def split_data_dirs(data_dirs_str: str) -> list[Path]:
    return [Path(d) for d in data_dirs_str.split(os.pathsep) if d]

def env_data_dirs(include_data_home=False) -> list[Path]:
    '''data dirs from the XDG environment, most important first.
    raises ConfigError if $XDG_DATA_DIRS is not set.'''
    if XDG_DATA_DIRS_ENV not in os.environ:
        raise ConfigError(f'${XDG_DATA_DIRS_ENV} not set')

    data_dirs = list(xdg.xdg_data_dirs())
    if include_data_home:
        data_dirs.insert(0, xdg.xdg_data_home())
    return data_dirs

def resolve_data_dirs(
        settings: Settings, data_dirs_str: Optional[str] = None) -> list[Path]:
    '''data dirs to scan, in priority order.
    data_dirs_str, if given, replaces the XDG environment.'''
    if data_dirs_str is not None:
        data_dirs = split_data_dirs(data_dirs_str)
    else:
        data_dirs = env_data_dirs(settings.include_data_home)

    data_dirs += [Path(d) for d in settings.extra_data_dirs]

    if not data_dirs:
        raise ConfigError('no data dir to scan')
    return data_dirs
