from pathlib import Path
from typing import Any

from pytest import fixture

from slidez.components.deck_store import DEFAULT_STORAGE_KEY
from slidez.components.factory import SettingsFactory
from slidez.components.file_store import FileStore
from slidez.configuring import settings as settings_module
from slidez.configuring.settings import Settings


@fixture
def dirs(tmp_path: Path, monkeypatch: Any) -> tuple[Path, Path, Path]:
    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"
    workdir = tmp_path / "work"
    for d in (config_dir, workdir):
        d.mkdir()
    monkeypatch.setattr(
        settings_module, "appdirs_user_config_dir", lambda _: str(config_dir)
    )
    monkeypatch.setattr(
        settings_module, "appdirs_user_data_dir", lambda _: str(data_dir)
    )
    return config_dir, data_dir, workdir


def test_defaults(dirs: tuple[Path, Path, Path]) -> None:
    config_dir, data_dir, workdir = dirs
    settings = Settings.from_yaml(workdir)
    assert settings.storage_key == DEFAULT_STORAGE_KEY
    assert settings.export_filename == "presentation.json"
    assert settings.paths.current_dir == workdir.resolve()
    assert settings.paths.user_config_dir == config_dir.resolve()
    assert settings.paths.store_dir == (data_dir / "store").resolve()


def test_yaml_files_are_merged(dirs: tuple[Path, Path, Path]) -> None:
    config_dir, _, workdir = dirs
    (config_dir / "slidez.yml").write_text(
        "storage_key: user-key\nnew_slide_text: From user\n", encoding="utf8"
    )
    (workdir / "slidez.yml").write_text(
        f"new_slide_text: From workdir\npaths:\n  store_dir: {workdir / 'decks'}\n",
        encoding="utf8",
    )
    settings = Settings.from_yaml(workdir)
    assert settings.storage_key == "user-key"
    assert settings.new_slide_text == "From workdir"
    assert settings.paths.store_dir == (workdir / "decks").resolve()


def test_empty_yaml_file(dirs: tuple[Path, Path, Path]) -> None:
    _, _, workdir = dirs
    (workdir / "slidez.yml").write_text("", encoding="utf8")
    assert Settings.from_yaml(workdir).storage_key == DEFAULT_STORAGE_KEY


def test_factory(dirs: tuple[Path, Path, Path]) -> None:
    _, data_dir, workdir = dirs
    (workdir / "slidez.yml").write_text("new_slide_text: Blank\n", encoding="utf8")
    factory = SettingsFactory(Settings.from_yaml(workdir))
    assert isinstance(factory.store(), FileStore)
    deck_store = factory.deck_store()
    deck_store.add_slide()
    assert deck_store.current_slide.text == "Blank"
    assert (data_dir / "store" / f"{DEFAULT_STORAGE_KEY}.json").is_file()


def test_templated_paths(dirs: tuple[Path, Path, Path]) -> None:
    _, data_dir, workdir = dirs
    (workdir / "slidez.yml").write_text(
        'paths:\n  store_dir: "{user_data_dir}/other"\n', encoding="utf8"
    )
    settings = Settings.from_yaml(workdir)
    assert settings.paths.store_dir == (data_dir / "other").resolve()

    (workdir / "slidez.yml").write_text(
        'paths:\n  store_dir: "{current_dir}/decks"\n', encoding="utf8"
    )
    settings = Settings.from_yaml(workdir)
    assert settings.paths.store_dir == (workdir / "decks").resolve()
