"""Static asset lookup for hosted projects.

Only path resolution happens here; the router streams the file with
``FileResponse``. Nothing is cached.
"""

from __future__ import annotations

import logging
from pathlib import Path

from hosting_api.config import HostingConfig
from hosting_api.models.project import BROWSER_FRAMEWORK_TYPES, ProjectType
from hosting_api.services import project_resolver, type_classifier
from hosting_api.services.errors import AssetNotFoundError, ProjectNotHostedError

logger = logging.getLogger(__name__)


def static_root(project_path: Path, project_type: ProjectType) -> Path:
    """Directory served for a project: build output for browser frameworks, else the project itself."""
    if project_type in BROWSER_FRAMEWORK_TYPES:
        dist = project_path / "dist"
        if dist.exists():
            return dist
        return project_path / "build"
    return project_path


def resolve_asset_path(root: Path, asset_path: str) -> Path:
    """Join asset_path onto root, refusing anything that lands outside it."""
    if "\x00" in asset_path:
        raise AssetNotFoundError()
    try:
        resolved_root = root.resolve()
        candidate = (resolved_root / asset_path).resolve()
        if not candidate.is_relative_to(resolved_root):
            logger.warning("asset_path_escape root=%s requested=%r", root, asset_path)
            raise AssetNotFoundError()
        if not candidate.is_file():
            raise AssetNotFoundError()
    except (OSError, RuntimeError) as exc:
        # Symlink loops raise RuntimeError on older interpreters, over-long names OSError.
        logger.info("asset_path_unresolvable requested=%r error=%s", asset_path, exc.__class__.__name__)
        raise AssetNotFoundError() from None
    return candidate


def serve_asset(config: HostingConfig, org: str, name: str, asset_path: str) -> Path:
    """Locate one file inside a hosted project's static root."""
    if not project_resolver.is_hosted(config, org, name):
        raise ProjectNotHostedError()
    project_path = project_resolver.resolve_project(config, org, name)
    if project_path is None:
        raise ProjectNotHostedError()

    project_type = type_classifier.classify_type(project_path)
    root = static_root(project_path, project_type)
    return resolve_asset_path(root, asset_path)
