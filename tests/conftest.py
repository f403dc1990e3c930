from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def fake_home(monkeypatch, tmp_path_factory):
    '''keep tmp files out of the user tree for classification'''
    monkeypatch.setenv('HOME', str(tmp_path_factory.mktemp('nohome')))


@pytest.fixture
def make_desktop():
    def _make(data_dir: Path, name: str, contents: str) -> Path:
        apps_dir = data_dir / 'applications'
        apps_dir.mkdir(parents=True, exist_ok=True)
        path = apps_dir / name
        path.write_text(contents, encoding='utf-8')
        return path
    return _make


@pytest.fixture
def make_app(make_desktop):
    def _make(data_dir: Path, name: str, command: str) -> Path:
        return make_desktop(
            data_dir, f'{name}.desktop',
            f'[Desktop Entry]\nType=Application\nName={name}\n'
            f'Exec={command}\n')
    return _make
