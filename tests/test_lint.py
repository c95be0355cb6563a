from __future__ import annotations

import json
from pathlib import Path

from create_vue.config import Configuration
from create_vue.lint import build_eslint_config, build_lint_package_fragment, render_eslint
from create_vue.plan import build_render_plan
from create_vue.scaffold import DEFAULT_TEMPLATE_ROOT, ProjectScaffolder


def test_eslint_config_extends_follow_features():
    config = Configuration.from_target("demo", eslint=True, prettier=True, typescript=True)
    assert build_eslint_config(config)["extends"] == [
        "plugin:vue/vue3-essential",
        "eslint:recommended",
        "@vue/eslint-config-typescript/recommended",
        "@vue/eslint-config-prettier",
    ]
    assert "overrides" not in build_eslint_config(config)


def test_eslint_config_adds_cypress_override():
    config = Configuration.from_target("demo", eslint=True, tests=True)
    overrides = build_eslint_config(config)["overrides"]
    assert overrides[0]["extends"] == ["plugin:cypress/recommended"]
    assert overrides[0]["files"] == [
        "**/__tests__/*.spec.{js,ts,jsx,tsx}",
        "cypress/integration/**.spec.{js,ts,jsx,tsx}",
    ]


def test_lint_script_includes_typescript_extensions():
    plain = build_lint_package_fragment(Configuration.from_target("demo", eslint=True))
    typed = build_lint_package_fragment(Configuration.from_target("demo", eslint=True, typescript=True))
    assert ".ts" not in plain["scripts"]["lint"]
    assert "devDependencies" not in plain
    assert ".vue,.js,.jsx,.cjs,.mjs,.ts,.tsx,.cts,.mts" in typed["scripts"]["lint"]
    assert "@vue/eslint-config-typescript" in typed["devDependencies"]


def test_render_eslint_writes_config_and_merges_package(tmp_path: Path):
    (tmp_path / "package.json").write_text(json.dumps({"name": "demo", "version": "0.0.0"}), encoding="utf-8")
    config = Configuration.from_target("demo", eslint=True, prettier=True, tests=True)

    render_eslint(tmp_path, config, build_render_plan(config).lint, DEFAULT_TEMPLATE_ROOT)

    package = json.loads((tmp_path / "package.json").read_text(encoding="utf-8"))
    assert package["name"] == "demo"
    assert {"eslint", "eslint-plugin-vue", "prettier", "eslint-plugin-cypress"} <= set(package["devDependencies"])
    assert package["scripts"]["lint"].startswith("eslint . --ext")
    assert (tmp_path / ".prettierrc.json").exists()
    eslintrc = (tmp_path / ".eslintrc.cjs").read_text(encoding="utf-8")
    assert eslintrc.startswith("/* eslint-env node */\nmodule.exports = {")
    assert "@vue/eslint-config-prettier" in eslintrc


def test_generated_project_lints_component_and_e2e_specs(tmp_path: Path):
    config = Configuration.from_target("demo", eslint=True, tests=True)
    root = ProjectScaffolder().create(config, tmp_path)

    specs = sorted(path.relative_to(root).as_posix() for path in root.rglob("*.spec.js"))
    assert specs == ["cypress/integration/example.spec.js", "src/components/__tests__/HelloWorld.spec.js"]
    eslintrc = (root / ".eslintrc.cjs").read_text(encoding="utf-8")
    assert "**/__tests__/*.spec.{js,ts,jsx,tsx}" in eslintrc
    assert "cypress/integration/**.spec.{js,ts,jsx,tsx}" in eslintrc
