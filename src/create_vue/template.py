"""Template layer rendering and lightweight string templating."""

from __future__ import annotations

import json
import logging
import re
import shutil
from pathlib import Path
from typing import Any, Mapping

from .errors import TemplateRenderingError

__all__ = [
    "TemplateRenderer",
    "deep_merge",
    "merge_package_json",
    "sort_dependencies",
]


LOGGER = logging.getLogger(__name__)

_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<expression>[^{}]+?)\s*}}")
_DEPENDENCY_GROUPS = (
    "dependencies",
    "devDependencies",
    "peerDependencies",
    "optionalDependencies",
)
PACKAGE_JSON = "package.json"


def _resolve_value(context: Mapping[str, Any], dotted_path: str) -> Any:
    value: Any = context
    for segment in dotted_path.split("."):
        if isinstance(value, Mapping) and segment in value:
            value = value[segment]
            continue
        raise KeyError(segment)
    return value


def deep_merge(target: Mapping[str, Any], source: Mapping[str, Any]) -> dict[str, Any]:
    """Return a new mapping with ``source`` merged over ``target``.

    Nested mappings are merged recursively, lists are unioned keeping the
    first-seen order and any other value from ``source`` replaces the value
    in ``target``.
    """

    merged = dict(target)
    for key, value in source.items():
        existing = merged.get(key)
        if isinstance(existing, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(existing, value)
        elif isinstance(existing, list) and isinstance(value, list):
            merged[key] = existing + [item for item in value if item not in existing]
        else:
            merged[key] = value
    return merged


def sort_dependencies(package: Mapping[str, Any]) -> dict[str, Any]:
    """Sort every dependency group of ``package`` alphabetically."""

    result = dict(package)
    for group in _DEPENDENCY_GROUPS:
        if isinstance(result.get(group), Mapping):
            result[group] = dict(sorted(result[group].items()))
    return result


def _write_package_json(path: Path, package: Mapping[str, Any]) -> None:
    path.write_text(json.dumps(package, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def merge_package_json(path: str | Path, fragment: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``fragment`` into the ``package.json`` at ``path`` and write it back."""

    path = Path(path)
    existing = json.loads(path.read_text(encoding="utf-8"))
    package = sort_dependencies(deep_merge(existing, fragment))
    _write_package_json(path, package)
    LOGGER.debug("merged %s", path)
    return package


class TemplateRenderer:
    """Copy template layers into a project and render ``{{ placeholder }}`` strings."""

    def render_string(self, template: str, context: Mapping[str, Any]) -> str:
        """Render ``template`` using ``context``.

        Dotted expressions such as ``{{ commands.dev }}`` look up nested
        mappings. A placeholder without a value raises
        :class:`TemplateRenderingError`.
        """

        def substitute(match: re.Match[str]) -> str:
            key = match.group("expression").strip()
            try:
                value = _resolve_value(context, key)
            except KeyError as exc:
                raise TemplateRenderingError(f"missing value for '{key}'") from exc
            return str(value)

        return _PLACEHOLDER_PATTERN.sub(substitute, template)

    def render_directory(self, template_dir: str | Path, target_dir: str | Path) -> None:
        """Copy every entry of ``template_dir`` into ``target_dir``.

        An existing ``package.json`` at the destination is merged with the
        template's copy instead of being replaced. Files whose name starts with
        ``_`` are written as dotfiles (``_gitignore`` becomes ``.gitignore``).
        """

        template_dir = Path(template_dir)
        target_dir = Path(target_dir)
        if not template_dir.is_dir():
            raise FileNotFoundError(template_dir)

        LOGGER.debug("rendering %s into %s", template_dir, target_dir)
        self._render_path(template_dir, target_dir)

    def _render_path(self, source: Path, destination: Path) -> None:
        if source.is_dir():
            destination.mkdir(parents=True, exist_ok=True)
            for child in sorted(source.iterdir()):
                self._render_path(child, destination / child.name)
            return

        if source.name == PACKAGE_JSON and destination.exists():
            merge_package_json(destination, json.loads(source.read_text(encoding="utf-8")))
            return

        if source.name.startswith("_"):
            destination = destination.with_name("." + source.name[1:])

        shutil.copyfile(source, destination)
