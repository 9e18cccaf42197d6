"""Configuration dataclasses for the scaffolder."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

PROJECT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


@dataclass(frozen=True, kw_only=True)
class TemplateChoice:
    """
    A selectable client template.

    Attributes:
        value: Identifier used in the remote path and as the default project name.
        description: Human-readable label shown in the selection menu.
    """

    value: str
    description: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Template value must be non-empty.")

    @property
    def label(self) -> str:
        return f"{self.value} ({self.description})"


@dataclass(frozen=True, kw_only=True)
class ScaffoldConfig:
    """
    Everything the pipeline needs to know about where templates and versions come from.

    Attributes:
        templates: Templates offered to the user, in menu order.
        template_ref_prefix: Remote path the selected template value is appended to.
        starter_ref: Remote reference of the starter kit, always fetched.
        client_dir_name: Subdirectory receiving the selected template.
        starter_dir_name: Subdirectory receiving the starter kit.
        registry_url: Dist-tags endpoint, formatted with ``package``.
        anchor_package: Package whose ``latest`` tag replaces workspace markers.
        namespace_prefix: Dependency names starting with this are candidates for rewriting.
        workspace_marker: Version strings starting with this are rewritten.
        registry_timeout: Seconds before the registry lookup gives up, ``None`` waits forever.
        docs_url: Link printed in the final instructions.
    """

    templates: tuple[TemplateChoice, ...]
    template_ref_prefix: str = "dojoengine/dojo.js/clients/react"
    starter_ref: str = "dojoengine/dojo-starter"
    client_dir_name: str = "client"
    starter_dir_name: str = "dojo-starter"
    registry_url: str = "https://registry.npmjs.org/-/package/{package}/dist-tags"
    anchor_package: str = "@dojoengine/core"
    namespace_prefix: str = "@dojoengine"
    workspace_marker: str = "workspace:"
    registry_timeout: float | None = None
    docs_url: str = "https://book.dojoengine.org/"

    def __post_init__(self) -> None:
        if not self.templates:
            raise ValueError("At least one template must be configured.")
        values = [t.value for t in self.templates]
        if len(set(values)) != len(values):
            raise ValueError(f"Template values must be unique, got {values}.")
        if self.client_dir_name == self.starter_dir_name:
            raise ValueError(
                f"client_dir_name and starter_dir_name must differ, got {self.client_dir_name!r}."
            )
        if "{package}" not in self.registry_url:
            raise ValueError(f"registry_url must contain '{{package}}', got {self.registry_url!r}.")
        if self.registry_timeout is not None and self.registry_timeout <= 0:
            raise ValueError(f"registry_timeout must be positive, got {self.registry_timeout}.")

    def template_ref(self, template: TemplateChoice) -> str:
        return f"{self.template_ref_prefix}/{template.value}"

    def find_template(self, value: str) -> TemplateChoice:
        """Look up a configured template by value. Raises ``KeyError`` if unknown."""
        for t in self.templates:
            if t.value == value:
                return t
        raise KeyError(value)

    def paths(self, cwd: Path, project_name: str) -> ProjectPaths:
        root = cwd / project_name
        return ProjectPaths(
            root=root,
            client=root / self.client_dir_name,
            starter=root / self.starter_dir_name,
        )


@dataclass(frozen=True, kw_only=True)
class ProjectPaths:
    """Directories making up a scaffolded project."""

    root: Path
    client: Path
    starter: Path

    @property
    def manifest(self) -> Path:
        return self.client / "package.json"


DOJO_TEMPLATES: tuple[TemplateChoice, ...] = (
    TemplateChoice(value="react-app", description="React app using Dojo"),
    TemplateChoice(value="react-phaser-example", description="React/Phaser app using Dojo"),
    TemplateChoice(value="react-pwa-app", description="React Progressive Web Apps using Dojo"),
    TemplateChoice(value="react-threejs", description="React Threejs using Dojo"),
)

DEFAULT_CONFIG = ScaffoldConfig(templates=DOJO_TEMPLATES)
