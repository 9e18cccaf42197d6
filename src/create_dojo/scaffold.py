"""The start pipeline: prompt, create directories, fetch, rewrite."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path
from typing import Protocol, TypeVar

from create_dojo.config import PROJECT_NAME_PATTERN, ProjectPaths, ScaffoldConfig, TemplateChoice
from create_dojo.errors import FetchError, FilesystemError, ValidationError
from create_dojo.fetch import Fetcher, fetch_template
from create_dojo.manifest import rewrite_manifest
from create_dojo.registry import get_latest_version

logger = logging.getLogger(__name__)

T = TypeVar("T")

INVALID_NAME_MESSAGE = "Project name may only include letters, numbers, underscores and hashes."


class Prompter(Protocol):
    """Interactive input used to collect the user's selections."""

    def select(self, question: str, options: list[T], labels: list[str]) -> T: ...

    def text(self, question: str, default: str, validate: Callable[[str], str | None]) -> str:
        """Ask until *validate* returns ``None`` for the answer, then return it."""
        ...


def validate_project_name(name: str) -> str | None:
    """Return ``None`` if *name* is acceptable, otherwise the message to show."""
    if PROJECT_NAME_PATTERN.fullmatch(name):
        return None
    return INVALID_NAME_MESSAGE


def check_project_name(name: str) -> str:
    """Like ``validate_project_name`` but raises ``ValidationError``."""
    message = validate_project_name(name)
    if message is not None:
        raise ValidationError(message)
    return name


def collect_selections(
    config: ScaffoldConfig,
    prompter: Prompter,
    template: TemplateChoice | None = None,
) -> tuple[TemplateChoice, str]:
    """Ask for the template (unless given) and the project name."""
    if template is None:
        templates = list(config.templates)
        template = prompter.select("Select a template", templates, [t.label for t in templates])
    name = prompter.text("Project name", default=template.value, validate=validate_project_name)
    return template, check_project_name(name)


def init_directories(paths: ProjectPaths) -> None:
    """Create the project root, client and starter directories. Existing ones are kept."""
    for path in (paths.root, paths.client, paths.starter):
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FilesystemError(path, e) from e
        logger.debug("Ensured directory %s", path)


@dataclass(kw_only=True)
class ScaffoldResult:
    """
    Outcome of a successful run.

    Attributes:
        paths: Directories that were created.
        template: Template fetched into the client directory.
        rewritten: Dependency names pinned to the latest version.
        starter_error: Failure of the starter kit fetch, if it failed.
    """

    paths: ProjectPaths
    template: TemplateChoice
    rewritten: list[str] = field(default_factory=list)
    starter_error: FetchError | None = None


def scaffold(
    config: ScaffoldConfig,
    cwd: Path,
    template: TemplateChoice,
    project_name: str,
    fetcher: Fetcher,
    *,
    latest_version: Callable[[], str] | None = None,
    report: Callable[[str], None] = logger.info,
) -> ScaffoldResult:
    """
    Create a project under *cwd* from *template*.

    Stages run strictly in order and any fatal error propagates with whatever
    was already written left on disk. A failed starter kit fetch is not fatal:
    it is logged and returned in ``ScaffoldResult.starter_error``.

    Args:
        config: Template list and remote locations.
        cwd: Directory the project root is created in.
        template: Template fetched into the client directory.
        project_name: Name of the root directory and of the client package.
        fetcher: Materializes remote references on disk.
        latest_version: Overrides the registry lookup.
        report: Receives one line per stage.
    """
    check_project_name(project_name)
    paths = config.paths(cwd, project_name)

    init_directories(paths)

    report(f"Downloading {template.value} into {config.client_dir_name} directory...")
    fetch_template(fetcher, config.template_ref(template), paths.client)

    report(f"Downloading {config.starter_dir_name}...")
    starter_error: FetchError | None = None
    try:
        fetch_template(fetcher, config.starter_ref, paths.starter)
    except FetchError as e:
        logger.warning("%s", e)
        starter_error = e

    if latest_version is None:
        url = config.registry_url.format(package=config.anchor_package)
        latest_version = partial(get_latest_version, url, timeout=config.registry_timeout)

    report(f"Rewriting {config.client_dir_name}/package.json...")
    rewritten = rewrite_manifest(
        paths.client,
        project_name,
        latest_version=latest_version,
        namespace_prefix=config.namespace_prefix,
        workspace_marker=config.workspace_marker,
    )

    return ScaffoldResult(
        paths=paths, template=template, rewritten=rewritten, starter_error=starter_error
    )
