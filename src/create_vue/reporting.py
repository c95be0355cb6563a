"""README generation and post-scaffold instructions."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from .template import TemplateRenderer

__all__ = [
    "PACKAGE_MANAGERS",
    "detect_package_manager",
    "generate_readme",
    "get_command",
    "next_steps",
]


# Checked in order against ``npm_execpath``; npm is the fallback.
PACKAGE_MANAGERS = ("pnpm", "yarn")
FALLBACK_PACKAGE_MANAGER = "npm"


README_TEMPLATE = """# {{ project_name }}

This template should help get you started developing with Vue 3 in Vite.

## Recommended IDE Setup

[VSCode](https://code.visualstudio.com/) + [Volar](https://marketplace.visualstudio.com/items?itemName=johnsoncodehk.volar) (and disable Vetur) + [TypeScript Vue Plugin (Volar)](https://marketplace.visualstudio.com/items?itemName=johnsoncodehk.vscode-typescript-vue-plugin).
"""

SFC_TYPE_SUPPORT_TEMPLATE = """
## Type Support for `.vue` Imports in TS

TypeScript cannot handle type information for `.vue` imports by default, so we replace the `tsc` CLI with `vue-tsc` for type checking. In editors, we need [TypeScript Vue Plugin (Volar)](https://marketplace.visualstudio.com/items?itemName=johnsoncodehk.vscode-typescript-vue-plugin) to make the TypeScript language service aware of `.vue` types.
"""

SETUP_TEMPLATE = """
## Customize configuration

See [Vite Configuration Reference](https://vitejs.dev/config/).

## Project Setup

```sh
{{ commands.install }}
```

### Compile and Hot-Reload for Development

```sh
{{ commands.dev }}
```

### {{ build_title }}

```sh
{{ commands.build }}
```
"""

TESTS_TEMPLATE = """
### Run Unit Tests with [Cypress Component Testing](https://docs.cypress.io/guides/component-testing/introduction)

```sh
{{ commands.test_unit }} # or `{{ commands.test_unit_ci }}` for headless testing
```

### Run End-to-End Tests with [Cypress](https://www.cypress.io/)

```sh
{{ commands.build }}
{{ commands.test_e2e }} # or `{{ commands.test_e2e_ci }}` for headless testing
```
"""

LINT_TEMPLATE = """
### Lint with [ESLint](https://eslint.org/)

```sh
{{ commands.lint }}
```
"""


def detect_package_manager(environ: Mapping[str, str]) -> str:
    """Guess the package manager that launched the tool from ``npm_execpath``."""

    execpath = environ.get("npm_execpath", "")
    for manager in PACKAGE_MANAGERS:
        if manager in execpath:
            return manager
    return FALLBACK_PACKAGE_MANAGER


def get_command(package_manager: str, script: str) -> str:
    """Return the shell command running ``script`` with ``package_manager``."""

    if script == "install":
        return "yarn" if package_manager == "yarn" else f"{package_manager} install"
    if package_manager == "npm":
        return f"npm run {script}"
    return f"{package_manager} {script}"


def generate_readme(
    project_name: str,
    package_manager: str,
    *,
    typescript: bool = False,
    tests: bool = False,
    eslint: bool = False,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Return the README markdown for a freshly scaffolded project."""

    renderer = renderer or TemplateRenderer()
    scripts = ("install", "dev", "build", "test:unit", "test:unit:ci", "test:e2e", "test:e2e:ci", "lint")
    context = {
        "project_name": project_name,
        "build_title": ("Type-Check, " if typescript else "") + "Compile and Minify for Production",
        "commands": {script.replace(":", "_"): get_command(package_manager, script) for script in scripts},
    }

    sections = [README_TEMPLATE]
    if typescript:
        sections.append(SFC_TYPE_SUPPORT_TEMPLATE)
    sections.append(SETUP_TEMPLATE)
    if tests:
        sections.append(TESTS_TEMPLATE)
    if eslint:
        sections.append(LINT_TEMPLATE)
    return renderer.render_string("".join(sections), context)


def next_steps(root: str | Path, cwd: str | Path, package_manager: str) -> list[str]:
    """Return the commands a user runs after scaffolding, in order."""

    root = Path(root)
    cwd = Path(cwd)
    steps: list[str] = []
    if root != cwd:
        steps.append(f"cd {os.path.relpath(root, cwd)}")
    steps.append(get_command(package_manager, "install"))
    steps.append(get_command(package_manager, "dev"))
    return steps
