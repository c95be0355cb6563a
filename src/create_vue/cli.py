"""Command line interface for create-vue."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Mapping, Sequence

from rich.console import Console

from .errors import OperationCancelled
from .prompts import Prompter, RichPrompter
from .reporting import detect_package_manager, next_steps
from .resolver import resolve_configuration
from .scaffold import ProjectScaffolder

BANNER = "Vue.js - The Progressive JavaScript Framework"

# (option strings, destination), every one a boolean flag with a --no- form.
_FEATURE_OPTIONS = (
    (("--default",), "default", "Skip feature prompts and turn every feature off"),
    (("--typescript", "--ts"), "typescript", "Add TypeScript"),
    (("--jsx",), "jsx", "Add JSX support"),
    (("--router", "--vue-router"), "router", "Add Vue Router"),
    (("--pinia",), "pinia", "Add Pinia for state management"),
    (("--with-tests", "--tests", "--cypress"), "tests", "Add Cypress for testing"),
    (("--eslint",), "eslint", "Add ESLint for code quality"),
    (("--eslint-with-prettier",), "eslint_with_prettier", "Add ESLint with Prettier formatting"),
)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-vue",
        description="Scaffold a new Vue project",
    )
    parser.add_argument("target", nargs="?", help="Directory to create the project in")
    for options, dest, help_text in _FEATURE_OPTIONS:
        parser.add_argument(
            *options,
            dest=dest,
            action=argparse.BooleanOptionalAction,
            default=None,
            help=help_text,
        )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Remove existing files in the target directory without asking",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(
    argv: Sequence[str] | None = None,
    *,
    cwd: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
    prompter: Prompter | None = None,
    console: Console | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    console = console or Console()
    cwd = Path(cwd) if cwd is not None else Path.cwd()
    environ = os.environ if environ is None else environ
    prompter = prompter or RichPrompter(console)
    flags = {dest: getattr(args, dest) for _, dest, _ in _FEATURE_OPTIONS}

    console.print(f"\n[bold green]{BANNER}[/bold green]\n")

    try:
        config = resolve_configuration(
            args.target,
            flags,
            cwd=cwd,
            prompter=prompter,
            force=args.force,
            on_invalid=lambda message: console.print(f"[red]{message}[/red]"),
        )
    except OperationCancelled as exc:
        console.print(f"[red]✖[/red] {exc}")
        return 1

    root = cwd / config.target_dir
    console.print(f"\nScaffolding project in {root}...")

    package_manager = detect_package_manager(environ)
    scaffolder = ProjectScaffolder()
    scaffolder.create(config, cwd, package_manager=package_manager)

    console.print("\nDone. Now run:\n")
    for step in next_steps(root, cwd, package_manager):
        console.print(f"  [bold green]{step}[/bold green]")
    console.print()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
