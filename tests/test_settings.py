from pathlib import Path

import pytest

from desktop_list.bases import DEFAULT_WORKERS
from desktop_list.settings import (
    ConfigError, Settings, env_data_dirs, load_settings, resolve_data_dirs,
    split_data_dirs)


def test_missing_config_file_gives_defaults(tmp_path):
    assert load_settings(tmp_path) == Settings()


def test_default_config_dir_uses_xdg_config_home(tmp_path, monkeypatch):
    monkeypatch.setenv('XDG_CONFIG_HOME', str(tmp_path))
    config_dir = tmp_path / 'xdg-desktop-list'
    config_dir.mkdir()
    (config_dir / 'config.yaml').write_text('workers: 3\n')

    assert load_settings().workers == 3


def test_load_config_file(tmp_path):
    (tmp_path / 'config.yaml').write_text(
        '# scan settings\n'
        'workers: 2\n'
        'include_data_home: true\n'
        'extra_data_dirs:\n'
        '  - /opt/share\n'
        '  - 12\n')

    settings = load_settings(tmp_path)

    assert settings.workers == 2
    assert settings.include_data_home is True
    assert settings.extra_data_dirs == ['/opt/share']


def test_bad_workers_value(tmp_path, caplog):
    (tmp_path / 'config.yaml').write_text('workers: 0\n')

    assert load_settings(tmp_path).workers == DEFAULT_WORKERS
    assert 'invalid workers value' in caplog.text


def test_wrong_types_give_defaults(tmp_path):
    (tmp_path / 'config.yaml').write_text(
        'workers: many\ninclude_data_home: [1]\nextra_data_dirs: {a: 1}\n')

    assert load_settings(tmp_path) == Settings()


def test_empty_and_non_mapping_files(tmp_path, caplog):
    (tmp_path / 'config.yaml').write_text('')
    assert load_settings(tmp_path) == Settings()

    (tmp_path / 'config.yaml').write_text('- workers\n')
    assert load_settings(tmp_path) == Settings()
    assert 'does not contain a mapping' in caplog.text


def test_malformed_config_file(tmp_path):
    (tmp_path / 'config.yaml').write_text('workers: [2\n')

    with pytest.raises(ConfigError):
        load_settings(tmp_path)


def test_split_data_dirs():
    assert split_data_dirs('/usr/local/share::/usr/share:') \
        == [Path('/usr/local/share'), Path('/usr/share')]


def test_xdg_data_dirs_must_be_set(monkeypatch):
    monkeypatch.delenv('XDG_DATA_DIRS', raising=False)

    with pytest.raises(ConfigError, match='XDG_DATA_DIRS'):
        env_data_dirs()


def test_env_data_dirs(monkeypatch):
    monkeypatch.setenv('XDG_DATA_DIRS', '/usr/local/share:/usr/share')
    monkeypatch.setenv('XDG_DATA_HOME', '/home/u/.local/share')

    assert env_data_dirs() == [Path('/usr/local/share'), Path('/usr/share')]
    assert env_data_dirs(include_data_home=True) == [
        Path('/home/u/.local/share'),
        Path('/usr/local/share'),
        Path('/usr/share')]


def test_resolve_with_command_line_dirs(monkeypatch):
    monkeypatch.delenv('XDG_DATA_DIRS', raising=False)
    settings = Settings(extra_data_dirs=['/opt/share'])

    assert resolve_data_dirs(settings, '/a:/b') \
        == [Path('/a'), Path('/b'), Path('/opt/share')]


def test_resolve_with_nothing_to_scan():
    with pytest.raises(ConfigError):
        resolve_data_dirs(Settings(), '')
