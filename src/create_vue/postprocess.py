"""Transformations applied to a fully rendered project tree."""

from __future__ import annotations

import logging
from pathlib import Path

from .traverse import empty_dir, pre_order_traverse

__all__ = ["TEST_DIRECTORIES", "convert_to_typescript", "remove_tests"]


LOGGER = logging.getLogger(__name__)

TEST_DIRECTORIES = frozenset({"cypress", "__tests__"})

INDEX_HTML = "index.html"
JS_ENTRY = "src/main.js"
TS_ENTRY = "src/main.ts"


def _noop(path: Path) -> None:
    return None


def _convert_file(path: Path) -> None:
    if path.suffix == ".js":
        ts_path = path.with_suffix(".ts")
        if ts_path.exists():
            LOGGER.debug("removing %s, %s already exists", path, ts_path.name)
            path.unlink()
        else:
            LOGGER.debug("renaming %s to %s", path, ts_path.name)
            path.rename(ts_path)
    elif path.name == "jsconfig.json":
        path.rename(path.with_name("tsconfig.json"))


def convert_to_typescript(root: str | Path) -> None:
    """Turn the JavaScript project at ``root`` into a TypeScript one.

    Every ``.js`` file is renamed to ``.ts`` unless a ``.ts`` sibling was
    already rendered, in which case the ``.js`` file is deleted. Each
    ``jsconfig.json`` becomes ``tsconfig.json`` and ``index.html`` is pointed
    at the TypeScript entry file.
    """

    root = Path(root)
    pre_order_traverse(root, _noop, _convert_file)

    index_html = root / INDEX_HTML
    content = index_html.read_text(encoding="utf-8")
    index_html.write_text(content.replace(JS_ENTRY, TS_ENTRY), encoding="utf-8")


def _prune_test_directory(path: Path) -> None:
    if path.name in TEST_DIRECTORIES:
        LOGGER.debug("removing test directory %s", path)
        empty_dir(path)
        path.rmdir()


def remove_tests(root: str | Path) -> None:
    """Delete every ``cypress`` and ``__tests__`` directory below ``root``."""

    pre_order_traverse(root, _prune_test_directory, _noop)
