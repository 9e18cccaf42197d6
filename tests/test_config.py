"""Unit tests for scaffolder configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from create_dojo.config import DEFAULT_CONFIG, ScaffoldConfig, TemplateChoice


class TestDefaultConfig:
    def test_template_values(self) -> None:
        values = [t.value for t in DEFAULT_CONFIG.templates]
        assert values == ["react-app", "react-phaser-example", "react-pwa-app", "react-threejs"]

    def test_template_ref(self) -> None:
        template = DEFAULT_CONFIG.find_template("react-app")
        assert DEFAULT_CONFIG.template_ref(template) == "dojoengine/dojo.js/clients/react/react-app"

    def test_registry_url(self) -> None:
        url = DEFAULT_CONFIG.registry_url.format(package=DEFAULT_CONFIG.anchor_package)
        assert url == "https://registry.npmjs.org/-/package/@dojoengine/core/dist-tags"

    def test_label_shows_identifier_and_description(self) -> None:
        template = DEFAULT_CONFIG.find_template("react-threejs")
        assert template.label == "react-threejs (React Threejs using Dojo)"

    def test_find_unknown_template(self) -> None:
        with pytest.raises(KeyError):
            DEFAULT_CONFIG.find_template("vue-app")

    def test_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.starter_ref = "someone/else"  # type: ignore[misc]


class TestProjectPaths:
    def test_derived_from_cwd_and_name(self, tmp_path: Path) -> None:
        paths = DEFAULT_CONFIG.paths(tmp_path, "my-game")
        assert paths.root == tmp_path / "my-game"
        assert paths.client == tmp_path / "my-game" / "client"
        assert paths.starter == tmp_path / "my-game" / "dojo-starter"
        assert paths.manifest == tmp_path / "my-game" / "client" / "package.json"


class TestValidation:
    def test_empty_templates(self) -> None:
        with pytest.raises(ValueError, match="At least one template"):
            ScaffoldConfig(templates=())

    def test_duplicate_templates(self) -> None:
        t = TemplateChoice(value="a", description="A")
        with pytest.raises(ValueError, match="unique"):
            ScaffoldConfig(templates=(t, t))

    def test_same_directory_names(self) -> None:
        t = TemplateChoice(value="a", description="A")
        with pytest.raises(ValueError, match="must differ"):
            ScaffoldConfig(templates=(t,), client_dir_name="x", starter_dir_name="x")

    def test_registry_url_without_placeholder(self) -> None:
        t = TemplateChoice(value="a", description="A")
        with pytest.raises(ValueError, match="registry_url"):
            ScaffoldConfig(templates=(t,), registry_url="https://example.com/tags")

    def test_non_positive_timeout(self) -> None:
        t = TemplateChoice(value="a", description="A")
        with pytest.raises(ValueError, match="registry_timeout"):
            ScaffoldConfig(templates=(t,), registry_timeout=0)

    def test_empty_template_value(self) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            TemplateChoice(value="", description="nothing")
