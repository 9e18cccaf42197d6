"""Rewriting the client's package.json after the template has been fetched."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from create_dojo.errors import ManifestError

logger = logging.getLogger(__name__)


def read_manifest(path: Path) -> dict[str, Any]:
    """Load and parse a package.json, raising ``ManifestError`` on any problem."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ManifestError(path, "file not found") from None
    except OSError as e:
        raise ManifestError(path, f"could not be read ({e.strerror or e})") from e
    except UnicodeDecodeError as e:
        raise ManifestError(path, f"not valid UTF-8 ({e.reason})") from e

    try:
        manifest = json.loads(text)
    except json.JSONDecodeError as e:
        raise ManifestError(path, f"invalid JSON ({e.msg} at line {e.lineno})") from e

    if not isinstance(manifest, dict):
        raise ManifestError(path, "top-level value is not an object")
    return manifest


def write_manifest(path: Path, manifest: dict[str, Any]) -> None:
    path.write_text(json.dumps(manifest, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def rewrite_dependencies(
    dependencies: dict[str, Any],
    latest_version: str,
    *,
    namespace_prefix: str,
    workspace_marker: str,
) -> list[str]:
    """
    Pin workspace-local dependencies in *namespace_prefix* to *latest_version*.

    Mutates *dependencies* in place and returns the names that changed.
    """
    changed = []
    for name, spec in dependencies.items():
        if (
            name.startswith(namespace_prefix)
            and isinstance(spec, str)
            and spec.startswith(workspace_marker)
        ):
            dependencies[name] = latest_version
            changed.append(name)
    return changed


def rewrite_manifest(
    client_dir: Path,
    project_name: str,
    *,
    latest_version: Callable[[], str],
    namespace_prefix: str = "@dojoengine",
    workspace_marker: str = "workspace:",
) -> list[str]:
    """
    Rename the client package and pin its workspace dependencies.

    The manifest is parsed and *latest_version* is called before anything is
    written, so a failure at either step leaves the file untouched.

    Args:
        client_dir: Directory holding ``package.json``.
        project_name: New value of the ``name`` field.
        latest_version: Returns the version replacing workspace markers.
        namespace_prefix: Only dependencies whose name starts with this are touched.
        workspace_marker: Only versions starting with this are replaced.

    Returns:
        Names of the dependencies that were rewritten.
    """
    path = client_dir / "package.json"
    manifest = read_manifest(path)
    version = latest_version()

    manifest["name"] = project_name

    dependencies = manifest.get("dependencies")
    if not isinstance(dependencies, dict):
        raise ManifestError(path, "missing 'dependencies' object")

    changed = rewrite_dependencies(
        dependencies,
        version,
        namespace_prefix=namespace_prefix,
        workspace_marker=workspace_marker,
    )
    write_manifest(path, manifest)

    logger.info("Pinned %d dependencies to %s in %s", len(changed), version, path)
    return changed
