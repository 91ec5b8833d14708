"""Provide general utility functions that would not fit in other modules."""

from collections.abc import Iterable, Iterator
from contextlib import suppress
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .components.protocols import DeckStoreProtocol


def import_module_and_submodules(package_name: str) -> None:
    """Import all modules and submodules from a package.

    From https://github.com/allenai/allennlp/blob/master/allennlp/common/util.py.

    Args:
        package_name: Name of the package to fully import.
    """
    from importlib import import_module, reload
    from importlib import invalidate_caches as importlib_invalidate_caches
    from pkgutil import walk_packages
    from sys import modules

    importlib_invalidate_caches()

    if package_name in modules:
        module = modules[package_name]
        reload(module)
    else:
        module = import_module(package_name)
    path = getattr(module, "__path__", [])
    path_string = "" if not path else path[0]

    for module_finder, name, _ in walk_packages(path):
        if (
            path_string
            and hasattr(module_finder, "path")
            and module_finder.path != path_string
        ):
            continue
        subpackage = f"{package_name}.{name}"
        import_module_and_submodules(subpackage)


def dirs_hierarchy(user_config_dir: Path, current_dir: Path) -> Iterator[Path]:
    """Yield the directories where settings files are looked up, by priority.

    Args:
        user_config_dir: Configuration directory of the user.
        current_dir: Work directory.

    Yields:
        Directories, from the lowest priority to the highest. The work directory \
        is skipped if it is the user config directory.
    """
    yield user_config_dir
    if current_dir != user_config_dir:
        yield current_dir


def load_yaml(path: Path) -> Any:
    from yaml import safe_load

    return safe_load(path.read_text(encoding="utf8"))


def load_all_yamls(paths: Iterable[Path]) -> Iterator[Any]:
    for path in paths:
        with suppress(FileNotFoundError):
            yield load_yaml(path)


def load_deck_store(workdir: Path) -> "DeckStoreProtocol":
    """Build the deck store configured for `workdir` and load its deck.

    Args:
        workdir: Directory in which settings files are looked up.

    Returns:
        The loaded deck store.
    """
    from .components.factory import SettingsFactory
    from .configuring.settings import Settings

    return SettingsFactory(Settings.from_yaml(workdir)).deck_store()
