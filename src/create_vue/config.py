"""Configuration record shared by the input resolver, planner and scaffolder."""

from __future__ import annotations

from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .naming import is_valid_package_name, to_valid_package_name

__all__ = ["Configuration", "DEFAULT_PROJECT_NAME", "FEATURE_FLAGS"]


DEFAULT_PROJECT_NAME = "vue-project"

FEATURE_FLAGS = (
    "typescript",
    "jsx",
    "router",
    "pinia",
    "tests",
    "eslint",
    "prettier",
)


class Configuration(BaseModel):
    """Normalised user choices driving template selection.

    Instances are created once, either from command line flags or from the
    interactive questions, and are never mutated afterwards.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    target_dir: str = Field(..., description="Directory name the project is created in, relative to the working directory.")
    package_name: str = Field(..., description="Name written to the generated package.json.")
    overwrite: bool = Field(default=False, description="Whether existing contents of the target directory are removed first.")
    explicit_mode: bool = Field(default=False, description="Feature flags came from the command line and prompts were skipped.")
    typescript: bool = Field(default=False, description="Convert the project to TypeScript.")
    jsx: bool = Field(default=False, description="Add JSX support.")
    router: bool = Field(default=False, description="Add Vue Router.")
    pinia: bool = Field(default=False, description="Add Pinia for state management.")
    tests: bool = Field(default=False, description="Add Cypress for unit and end-to-end testing.")
    eslint: bool = Field(default=False, description="Add ESLint for code quality.")
    prettier: bool = Field(default=False, description="Add Prettier through ESLint for code formatting.")

    @field_validator("package_name")
    @classmethod
    def _check_package_name(cls, value: str) -> str:
        if not is_valid_package_name(value):
            raise ValueError(f"invalid package.json name '{value}'")
        return value

    @model_validator(mode="after")
    def _check_formatting_needs_linting(self) -> "Configuration":
        if self.prettier and not self.eslint:
            raise ValueError("prettier is only available together with eslint")
        return self

    @classmethod
    def from_target(
        cls,
        target_dir: str,
        *,
        package_name: str | None = None,
        **features: bool,
    ) -> "Configuration":
        """Build a :class:`Configuration`, deriving the package name when omitted.

        Targets such as ``.`` normalise to an empty name; those fall back to
        :data:`DEFAULT_PROJECT_NAME`.
        """

        target = target_dir.strip() or DEFAULT_PROJECT_NAME
        if package_name is None:
            if is_valid_package_name(target):
                package_name = target
            else:
                package_name = to_valid_package_name(target) or DEFAULT_PROJECT_NAME
        return cls(target_dir=target, package_name=package_name, **features)

    def features(self) -> Mapping[str, bool]:
        """Return the feature toggles keyed by flag name."""

        return {name: getattr(self, name) for name in FEATURE_FLAGS}
