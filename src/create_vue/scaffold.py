"""Project scaffolding orchestration."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from .config import Configuration
from .lint import render_eslint
from .plan import BASE_LAYER, RenderPlan, build_render_plan
from .postprocess import convert_to_typescript, remove_tests
from .reporting import generate_readme
from .template import PACKAGE_JSON, TemplateRenderer
from .traverse import empty_dir

__all__ = ["DEFAULT_TEMPLATE_ROOT", "ProjectScaffolder"]


LOGGER = logging.getLogger(__name__)

DEFAULT_TEMPLATE_ROOT = Path(__file__).resolve().parent / "templates"

INITIAL_VERSION = "0.0.0"

VITE_CONFIG_TEMPLATE = """import { fileURLToPath, URL } from 'url'

import { defineConfig } from 'vite'
import vue from '@vitejs/plugin-vue'
{{ plugin_imports }}
// https://vitejs.dev/config/
export default defineConfig({
  plugins: [{{ plugins }}],
  resolve: {
    alias: {
      '@': fileURLToPath(new URL('./src', import.meta.url))
    }
  }
})
"""


@dataclass(slots=True)
class ProjectScaffolder:
    """Create a Vue project by layering template directories."""

    renderer: TemplateRenderer
    template_root: Path

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        template_root: str | Path | None = None,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.template_root = Path(template_root) if template_root else DEFAULT_TEMPLATE_ROOT

    def create(
        self,
        config: Configuration,
        cwd: str | Path,
        *,
        package_manager: str = "npm",
    ) -> Path:
        """Create the project described by ``config`` below ``cwd``.

        Returns the project root. Filesystem errors propagate and may leave a
        partially written tree behind.
        """

        root = Path(cwd) / config.target_dir
        if config.overwrite and root.exists():
            LOGGER.debug("emptying %s", root)
            empty_dir(root)
        else:
            root.mkdir(parents=True, exist_ok=True)

        package = {"name": config.package_name, "version": INITIAL_VERSION}
        (root / PACKAGE_JSON).write_text(json.dumps(package, indent=2) + "\n", encoding="utf-8")

        plan = build_render_plan(config)
        self.render_plan(plan, config, root)
        self.write_vite_config(config, root)

        if config.typescript:
            convert_to_typescript(root)
        if not config.tests:
            remove_tests(root)

        readme = generate_readme(
            config.target_dir,
            package_manager,
            typescript=config.typescript,
            tests=config.tests,
            eslint=config.eslint,
            renderer=self.renderer,
        )
        (root / "README.md").write_text(readme, encoding="utf-8")
        return root

    def render(self, layer: str, root: Path) -> None:
        """Render the template directory ``layer`` into ``root``."""

        self.renderer.render_directory(self.template_root / layer, root)

    def render_plan(self, plan: RenderPlan, config: Configuration, root: Path) -> None:
        self.render(BASE_LAYER, root)
        for layer in plan.configs:
            self.render(layer, root)
        if plan.lint:
            render_eslint(root, config, plan.lint, self.template_root, self.renderer)
        self.render(plan.code_layer, root)
        self.render(plan.entry_layer, root)

    def write_vite_config(self, config: Configuration, root: Path) -> None:
        plugins = ["vue()"]
        imports = ""
        if config.jsx:
            plugins.append("vueJsx()")
            imports = "import vueJsx from '@vitejs/plugin-vue-jsx'\n"
        context = {"plugin_imports": imports, "plugins": ", ".join(plugins)}
        rendered = self.renderer.render_string(VITE_CONFIG_TEMPLATE, context)
        (root / "vite.config.js").write_text(rendered, encoding="utf-8")
