"""Turn command line flags and interactive answers into a configuration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Mapping

from .config import DEFAULT_PROJECT_NAME, Configuration
from .errors import OperationCancelled
from .naming import is_valid_package_name, to_valid_package_name
from .prompts import Prompter, Question, ask_questions

__all__ = ["can_safely_overwrite", "is_explicit_mode", "resolve_configuration"]


LOGGER = logging.getLogger(__name__)

# Prompted features, in the order they are asked.
_FEATURE_QUESTIONS = (
    ("typescript", "Add TypeScript?"),
    ("jsx", "Add JSX Support?"),
    ("router", "Add Vue Router for Single Page Application development?"),
    ("pinia", "Add Pinia for state management?"),
    ("tests", "Add Cypress for testing?"),
    ("eslint", "Add ESLint for code quality?"),
)


def can_safely_overwrite(directory: Path) -> bool:
    """Return ``True`` if ``directory`` is missing or empty."""

    if not directory.exists():
        return True
    return directory.is_dir() and not any(directory.iterdir())


def is_explicit_mode(flags: Mapping[str, bool | None]) -> bool:
    """Return ``True`` when any feature flag was given on the command line."""

    return any(value is not None for value in flags.values())


def _require_confirmation(confirmed: bool) -> bool:
    if not confirmed:
        raise OperationCancelled()
    return confirmed


def _build_questions(
    target: str | None,
    *,
    cwd: Path,
    force: bool,
    explicit_mode: bool,
) -> list[Question]:
    default_name = target or DEFAULT_PROJECT_NAME

    def current_target(answers: Mapping[str, Any]) -> str:
        return answers.get("project_name", default_name)

    def overwrite_message(answers: Mapping[str, Any]) -> str:
        name = current_target(answers)
        where = "Current directory" if name == "." else f'Target directory "{name}"'
        return f"{where} is not empty. Remove existing files and continue?"

    def skip_feature(answers: Mapping[str, Any]) -> bool:
        return explicit_mode

    questions = [
        Question(
            "project_name",
            "Project name:",
            kind="text",
            default=default_name,
            skip=lambda answers: bool(target),
            transform=lambda value: value.strip() or default_name,
        ),
        Question(
            "overwrite",
            overwrite_message,
            skip=lambda answers: force or can_safely_overwrite(cwd / current_target(answers)),
            transform=_require_confirmation,
        ),
        Question(
            "package_name",
            "Package name:",
            kind="text",
            default=lambda answers: to_valid_package_name(current_target(answers)),
            skip=lambda answers: is_valid_package_name(current_target(answers)),
            validate=lambda value: is_valid_package_name(value) or "Invalid package.json name",
        ),
    ]
    questions.extend(Question(name, message, skip=skip_feature) for name, message in _FEATURE_QUESTIONS)
    questions.append(
        Question(
            "prettier",
            "Add Prettier for code formatting?",
            skip=lambda answers: explicit_mode or not answers.get("eslint"),
        )
    )
    return questions


def resolve_configuration(
    target: str | None,
    flags: Mapping[str, bool | None],
    *,
    cwd: str | Path,
    prompter: Prompter,
    force: bool = False,
    on_invalid: Callable[[str], None] | None = None,
) -> Configuration:
    """Collect every choice needed to scaffold a project.

    Parameters
    ----------
    target:
        Target directory name from the command line, if any. When present the
        project name question is skipped.
    flags:
        Feature flags keyed by ``default``, ``typescript``, ``jsx``, ``router``,
        ``pinia``, ``tests``, ``eslint`` and ``eslint_with_prettier``. ``None``
        means the flag was not given. Any other value switches to explicit mode
        where no feature question is asked and absent flags count as off.
    cwd:
        Directory the target is resolved against.
    prompter:
        Answers the questions that are not skipped.
    force:
        Remove existing files in the target directory without asking.
    on_invalid:
        Called with the error message whenever a typed answer is rejected.

    Raises
    ------
    OperationCancelled
        The overwrite confirmation was declined or a prompt was interrupted.
    """

    explicit_mode = is_explicit_mode(flags)
    answers = ask_questions(
        _build_questions(target, cwd=Path(cwd), force=force, explicit_mode=explicit_mode),
        prompter,
        on_invalid=on_invalid,
    )
    target_dir = answers.get("project_name", target or DEFAULT_PROJECT_NAME)

    if explicit_mode:
        with_prettier = bool(flags.get("eslint_with_prettier"))
        features = {
            "typescript": bool(flags.get("typescript")),
            "jsx": bool(flags.get("jsx")),
            "router": bool(flags.get("router")),
            "pinia": bool(flags.get("pinia")),
            "tests": bool(flags.get("tests")),
            "eslint": bool(flags.get("eslint")) or with_prettier,
            "prettier": with_prettier,
        }
    else:
        features = {name: bool(answers.get(name, False)) for name, _ in _FEATURE_QUESTIONS}
        features["prettier"] = bool(answers.get("prettier", False))

    config = Configuration.from_target(
        target_dir,
        package_name=answers.get("package_name"),
        overwrite=force or bool(answers.get("overwrite", False)),
        explicit_mode=explicit_mode,
        **features,
    )
    LOGGER.debug("resolved configuration %s", config.model_dump())
    return config
