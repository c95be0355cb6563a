"""ESLint and Prettier setup for generated projects."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .config import Configuration
from .template import PACKAGE_JSON, TemplateRenderer, merge_package_json

__all__ = ["build_eslint_config", "build_lint_package_fragment", "render_eslint"]


LOGGER = logging.getLogger(__name__)

ESLINTRC = ".eslintrc.cjs"

_JS_EXTENSIONS = (".vue", ".js", ".jsx", ".cjs", ".mjs")
_TS_EXTENSIONS = (".ts", ".tsx", ".cts", ".mts")

_CYPRESS_OVERRIDE = {
    "files": [
        "**/__tests__/*.spec.{js,ts,jsx,tsx}",
        "cypress/integration/**.spec.{js,ts,jsx,tsx}",
    ],
    "extends": ["plugin:cypress/recommended"],
}


def build_eslint_config(config: Configuration) -> dict[str, Any]:
    """Return the ESLint configuration object for ``config``."""

    extends = ["plugin:vue/vue3-essential", "eslint:recommended"]
    if config.typescript:
        extends.append("@vue/eslint-config-typescript/recommended")
    if config.prettier:
        extends.append("@vue/eslint-config-prettier")

    eslint_config: dict[str, Any] = {
        "root": True,
        "extends": extends,
        "env": {"vue/setup-compiler-macros": True},
    }
    if config.tests:
        eslint_config["overrides"] = [_CYPRESS_OVERRIDE]
    return eslint_config


def build_lint_package_fragment(config: Configuration) -> dict[str, Any]:
    """Return the ``package.json`` additions that depend on other features."""

    extensions = _JS_EXTENSIONS + (_TS_EXTENSIONS if config.typescript else ())
    fragment: dict[str, Any] = {
        "scripts": {
            "lint": f"eslint . --ext {','.join(extensions)} --fix --ignore-path .gitignore",
        },
    }

    dev_dependencies: dict[str, str] = {}
    if config.typescript:
        dev_dependencies["@vue/eslint-config-typescript"] = "^10.0.0"
    if config.tests:
        dev_dependencies["eslint-plugin-cypress"] = "^2.12.1"
    if dev_dependencies:
        fragment["devDependencies"] = dev_dependencies
    return fragment


def render_eslint(
    root: str | Path,
    config: Configuration,
    layers: tuple[str, ...],
    template_root: str | Path,
    renderer: TemplateRenderer | None = None,
) -> None:
    """Render the lint ``layers`` into ``root`` and write ``.eslintrc.cjs``."""

    root = Path(root)
    template_root = Path(template_root)
    renderer = renderer or TemplateRenderer()

    for layer in layers:
        renderer.render_directory(template_root / layer, root)

    merge_package_json(root / PACKAGE_JSON, build_lint_package_fragment(config))

    body = json.dumps(build_eslint_config(config), indent=2)
    (root / ESLINTRC).write_text(
        f"/* eslint-env node */\nmodule.exports = {body}\n",
        encoding="utf-8",
    )
    LOGGER.debug("wrote %s", root / ESLINTRC)
