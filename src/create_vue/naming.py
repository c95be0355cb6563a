"""Package name validation and normalisation helpers."""

from __future__ import annotations

import re

__all__ = ["is_valid_package_name", "to_valid_package_name"]


_PACKAGE_NAME = re.compile(r"^(?:@[a-z0-9-*~][a-z0-9-*._~]*/)?[a-z0-9-~][a-z0-9-._~]*$")
_WHITESPACE = re.compile(r"\s+")
_LEADING_DOT_OR_UNDERSCORE = re.compile(r"^[._]")
_DISALLOWED = re.compile(r"[^a-z0-9-~]+")


def is_valid_package_name(name: str) -> bool:
    """Return ``True`` when ``name`` may be used as a ``package.json`` name.

    The accepted grammar is lowercase letters, digits, ``-``, ``.``, ``_`` and
    ``~`` with an optional ``@scope/`` prefix. Names may not start with ``.`` or
    ``_``.
    """

    return _PACKAGE_NAME.match(name) is not None


def to_valid_package_name(name: str) -> str:
    """Derive a package name from a directory or project name.

    Parameters
    ----------
    name:
        Free form text, usually the target directory name.

    The text is trimmed and lowercased, whitespace runs become ``-``, a single
    leading ``.`` or ``_`` is dropped and every remaining run of disallowed
    characters is replaced with ``-``.
    """

    candidate = name.strip().lower()
    candidate = _WHITESPACE.sub("-", candidate)
    candidate = _LEADING_DOT_OR_UNDERSCORE.sub("", candidate, count=1)
    return _DISALLOWED.sub("-", candidate)
