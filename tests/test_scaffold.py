from __future__ import annotations

import json
from pathlib import Path

import pytest

from create_vue.config import Configuration
from create_vue.scaffold import ProjectScaffolder


@pytest.fixture()
def scaffolder() -> ProjectScaffolder:
    return ProjectScaffolder()


def _files(root: Path) -> set[str]:
    return {path.relative_to(root).as_posix() for path in root.rglob("*") if path.is_file()}


def test_default_project(tmp_path: Path, scaffolder: ProjectScaffolder):
    root = scaffolder.create(Configuration.from_target("demo"), tmp_path)

    assert root == tmp_path / "demo"
    assert _files(root) == {
        ".gitignore",
        "README.md",
        "index.html",
        "jsconfig.json",
        "package.json",
        "public/favicon.svg",
        "src/App.vue",
        "src/assets/base.css",
        "src/components/HelloWorld.vue",
        "src/main.js",
        "vite.config.js",
    }
    package = json.loads((root / "package.json").read_text(encoding="utf-8"))
    assert package["name"] == "demo"
    assert package["version"] == "0.0.0"
    assert package["dependencies"] == {"vue": "^3.2.31"}
    assert "vueJsx" not in (root / "vite.config.js").read_text(encoding="utf-8")


def test_typescript_without_tests(tmp_path: Path, scaffolder: ProjectScaffolder):
    root = scaffolder.create(Configuration.from_target("demo", typescript=True), tmp_path)

    assert not (root / "cypress").exists()
    assert not (root / "src" / "components" / "__tests__").exists()
    assert (root / "tsconfig.json").exists()
    assert not (root / "jsconfig.json").exists()
    assert (root / "src" / "main.ts").exists()
    assert (root / "vite.config.ts").exists()
    assert "/src/main.ts" in (root / "index.html").read_text(encoding="utf-8")
    assert not [name for name in _files(root) if name.endswith(".js")]
    package = json.loads((root / "package.json").read_text(encoding="utf-8"))
    assert "vue-tsc" in package["devDependencies"]


def test_typescript_with_tests_keeps_specific_plugin(tmp_path: Path, scaffolder: ProjectScaffolder):
    config = Configuration.from_target("demo", typescript=True, tests=True)
    root = scaffolder.create(config, tmp_path)

    plugin = root / "cypress" / "plugins" / "index.ts"
    assert plugin.read_text(encoding="utf-8").startswith("/// <reference types=\"cypress\" />\n\nimport")
    assert not (root / "cypress" / "plugins" / "index.js").exists()
    assert (root / "cypress" / "tsconfig.json").exists()
    assert (root / "src" / "components" / "__tests__" / "HelloWorld.spec.ts").exists()


def test_every_feature(tmp_path: Path, scaffolder: ProjectScaffolder):
    config = Configuration.from_target(
        "full",
        jsx=True,
        router=True,
        pinia=True,
        tests=True,
        eslint=True,
        prettier=True,
    )
    root = scaffolder.create(config, tmp_path, package_manager="pnpm")

    package = json.loads((root / "package.json").read_text(encoding="utf-8"))
    assert {"vue", "vue-router", "pinia"} <= set(package["dependencies"])
    assert {"@vitejs/plugin-vue-jsx", "cypress", "eslint", "prettier"} <= set(package["devDependencies"])
    assert {"dev", "build", "test:unit", "test:e2e", "lint"} <= set(package["scripts"])
    assert "createPinia" in (root / "src" / "main.js").read_text(encoding="utf-8")
    assert "vueJsx()" in (root / "vite.config.js").read_text(encoding="utf-8")
    assert (root / "src" / "stores" / "counter.js").exists()
    assert (root / "src" / "router" / "index.js").exists()
    assert (root / ".eslintrc.cjs").exists()
    assert (root / ".prettierrc.json").exists()
    readme = (root / "README.md").read_text(encoding="utf-8")
    assert readme.startswith("# full\n")
    assert "pnpm lint" in readme


def test_overwrite_empties_existing_directory(tmp_path: Path, scaffolder: ProjectScaffolder):
    root = tmp_path / "demo"
    (root / "stale").mkdir(parents=True)
    (root / "stale" / "old.txt").write_text("old", encoding="utf-8")

    scaffolder.create(Configuration.from_target("demo", overwrite=True), tmp_path)

    assert not (root / "stale").exists()
    assert (root / "index.html").exists()


def test_missing_template_root_propagates(tmp_path: Path):
    scaffolder = ProjectScaffolder(template_root=tmp_path / "nowhere")
    with pytest.raises(FileNotFoundError):
        scaffolder.create(Configuration.from_target("demo"), tmp_path)
