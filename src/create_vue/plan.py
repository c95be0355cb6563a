"""Decision table turning a configuration into an ordered render plan."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .config import Configuration

__all__ = ["BASE_LAYER", "RenderPlan", "build_render_plan"]


BASE_LAYER = "base"

# (configuration attribute, template directory), applied in this order.
_CONFIG_LAYERS = (
    ("jsx", "config/jsx"),
    ("router", "config/router"),
    ("pinia", "config/pinia"),
    ("tests", "config/cypress"),
    ("typescript", "config/typescript"),
)


class RenderPlan(BaseModel):
    """Ordered template directories for one project."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    configs: tuple[str, ...] = Field(default=(), description="Feature config fragments in application order.")
    lint: tuple[str, ...] = Field(default=(), description="Lint layers; empty when linting is off.")
    code_variant: str = Field(..., description="Name of the directory under code/.")
    entry_variant: str = Field(..., description="Name of the directory under entry/.")

    @property
    def code_layer(self) -> str:
        return f"code/{self.code_variant}"

    @property
    def entry_layer(self) -> str:
        return f"entry/{self.entry_variant}"

    def layers(self) -> tuple[str, ...]:
        """Return every template directory in the order it is rendered."""

        return (BASE_LAYER, *self.configs, *self.lint, self.code_layer, self.entry_layer)


def _lint_layers(config: Configuration) -> tuple[str, ...]:
    if not config.eslint:
        return ()
    if config.prettier:
        return ("eslint/base", "eslint/prettier")
    return ("eslint/base",)


def _code_variant(config: Configuration) -> str:
    prefix = "typescript-" if config.typescript else ""
    return prefix + ("router" if config.router else "default")


def _entry_variant(config: Configuration) -> str:
    if config.pinia and config.router:
        return "router-and-pinia"
    if config.pinia:
        return "pinia"
    if config.router:
        return "router"
    return "default"


def build_render_plan(config: Configuration) -> RenderPlan:
    """Compute the :class:`RenderPlan` for ``config``.

    Linting and formatting only select lint layers, they never influence the
    code or entry variants.
    """

    return RenderPlan(
        configs=tuple(layer for flag, layer in _CONFIG_LAYERS if getattr(config, flag)),
        lint=_lint_layers(config),
        code_variant=_code_variant(config),
        entry_variant=_entry_variant(config),
    )
