"""Pre-order and post-order directory walkers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

__all__ = ["empty_dir", "post_order_traverse", "pre_order_traverse"]


PathCallback = Callable[[Path], None]


def _entries(directory: Path) -> list[os.DirEntry[str]]:
    with os.scandir(directory) as iterator:
        return sorted(iterator, key=lambda entry: entry.name)


def pre_order_traverse(
    directory: str | Path,
    dir_callback: PathCallback,
    file_callback: PathCallback,
) -> None:
    """Visit every entry below ``directory``, parents before their children.

    ``dir_callback`` runs before a directory is descended into. When the
    callback removes the directory the walk does not descend into it. Symbolic
    links are never followed and are reported to ``file_callback``.
    """

    for entry in _entries(Path(directory)):
        path = Path(entry.path)
        if entry.is_dir(follow_symlinks=False):
            dir_callback(path)
            if path.exists():
                pre_order_traverse(path, dir_callback, file_callback)
            continue
        file_callback(path)


def post_order_traverse(
    directory: str | Path,
    dir_callback: PathCallback,
    file_callback: PathCallback,
) -> None:
    """Visit every entry below ``directory``, children before their parents."""

    for entry in _entries(Path(directory)):
        path = Path(entry.path)
        if entry.is_dir(follow_symlinks=False):
            post_order_traverse(path, dir_callback, file_callback)
            dir_callback(path)
            continue
        file_callback(path)


def empty_dir(directory: str | Path) -> None:
    """Remove everything inside ``directory`` while keeping the directory itself."""

    post_order_traverse(directory, lambda path: path.rmdir(), lambda path: path.unlink())
