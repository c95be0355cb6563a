"""Sequential question runner with skip predicates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Literal, Mapping, Protocol, Sequence

from rich.console import Console
from rich.prompt import Confirm, Prompt

from .errors import OperationCancelled

__all__ = ["Prompter", "Question", "RichPrompter", "ask_questions"]


Answers = Mapping[str, Any]


class Prompter(Protocol):
    """Source of answers for :func:`ask_questions`."""

    def text(self, message: str, default: str) -> str:
        """Ask for free form text."""

    def confirm(self, message: str, default: bool) -> bool:
        """Ask a yes/no question."""


class RichPrompter:
    """Ask questions on the terminal with :mod:`rich.prompt`."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def text(self, message: str, default: str) -> str:
        try:
            return Prompt.ask(message, default=default, console=self.console)
        except (KeyboardInterrupt, EOFError) as exc:
            raise OperationCancelled() from exc

    def confirm(self, message: str, default: bool) -> bool:
        try:
            return Confirm.ask(message, default=default, console=self.console)
        except (KeyboardInterrupt, EOFError) as exc:
            raise OperationCancelled() from exc


def _never(answers: Answers) -> bool:
    return False


@dataclass(frozen=True, slots=True)
class Question:
    """One named question in a sequence.

    ``message`` and ``default`` may be callables receiving the answers given so
    far. ``skip`` decides whether the question is asked at all; skipped
    questions leave no entry in the answers. ``validate`` returns ``True`` or
    an error message, and an invalid answer is asked again. ``transform`` turns
    the raw answer into the stored value.
    """

    name: str
    message: str | Callable[[Answers], str]
    kind: Literal["text", "confirm"] = "confirm"
    default: Any = False
    skip: Callable[[Answers], bool] = _never
    validate: Callable[[str], bool | str] | None = None
    transform: Callable[[Any], Any] | None = None

    def _resolve(self, value: Any, answers: Answers) -> Any:
        return value(answers) if callable(value) else value

    def ask(self, prompter: Prompter, answers: Answers, on_invalid: Callable[[str], None]) -> Any:
        message = self._resolve(self.message, answers)
        default = self._resolve(self.default, answers)
        if self.kind == "confirm":
            value: Any = prompter.confirm(message, bool(default))
        else:
            while True:
                value = prompter.text(message, str(default))
                verdict = True if self.validate is None else self.validate(value)
                if verdict is True:
                    break
                on_invalid(str(verdict))
        if self.transform is not None:
            value = self.transform(value)
        return value


def ask_questions(
    questions: Sequence[Question],
    prompter: Prompter,
    *,
    on_invalid: Callable[[str], None] | None = None,
) -> dict[str, Any]:
    """Ask ``questions`` in order and return the collected answers."""

    answers: dict[str, Any] = {}
    report = on_invalid or (lambda message: None)
    for question in questions:
        if question.skip(answers):
            continue
        answers[question.name] = question.ask(prompter, answers, report)
    return answers
