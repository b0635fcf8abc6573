"""Hosting eligibility, listing and status assembly."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from hosting_api.config import HostingConfig
from hosting_api.models.project import (
    HostingCheckResult,
    HostingReason,
    ProjectSummary,
    ProjectUrls,
    StatusRecord,
)
from hosting_api.services import project_resolver, type_classifier
from hosting_api.services.errors import InvalidProjectIdentityError, ProjectNotFoundError

logger = logging.getLogger(__name__)

SIDECAR_DIR = ".hosting"
BUILD_STATUS_FILE = "build-status"
PUBLISHED_AT_FILE = "published-at"
UNKNOWN_BUILD_STATUS = "unknown"


def check_hosting(config: HostingConfig, org: str, name: str) -> HostingCheckResult:
    try:
        project_path = project_resolver.resolve_project(config, org, name)
    except InvalidProjectIdentityError:
        logger.warning("invalid_project_identity org=%r name=%r", org, name)
        project_path = None

    if project_path is None:
        return HostingCheckResult(
            hostable=False,
            reason=HostingReason.NOT_FOUND,
            org=org,
            name=name,
            message=f"Project {org}/{name} does not exist",
        )

    if not project_resolver.is_hosted(config, org, name):
        return HostingCheckResult(
            hostable=False,
            reason=HostingReason.NOT_CONFIGURED,
            org=org,
            name=name,
            message="Project exists but is not configured for hosting",
            suggestion=f"Run: {config.publish_command} {name}",
        )

    return HostingCheckResult(
        hostable=True,
        project_type=type_classifier.classify_type(project_path),
        project_path=str(project_path),
        org=org,
        name=name,
        message=f"Project {org}/{name} is available for hosting",
    )


def parse_config_filename(filename: str) -> Optional[tuple[str, str]]:
    """Split ``{org}-{name}.conf`` on the first hyphen.

    Lossy when the organization itself contains a hyphen; the publish tool
    writes names this way so the rule is kept as is.
    """
    if not filename.endswith(project_resolver.HOSTING_CONFIG_SUFFIX):
        return None
    stem = filename[: -len(project_resolver.HOSTING_CONFIG_SUFFIX)]
    org, sep, name = stem.partition("-")
    if not sep or not org or not name:
        return None
    return org, name


def _summarize(config: HostingConfig, filename: str) -> Optional[ProjectSummary]:
    parsed = parse_config_filename(filename)
    if parsed is None:
        logger.warning("hosting_config_unparseable file=%s", filename)
        return None
    org, name = parsed
    try:
        project_path = project_resolver.resolve_project(config, org, name)
    except InvalidProjectIdentityError:
        logger.warning("hosting_config_invalid_identity file=%s", filename)
        return None
    if project_path is None:
        logger.info("hosting_config_stale file=%s org=%s name=%s", filename, org, name)
        return None

    mtime = project_path.stat().st_mtime
    return ProjectSummary(
        org=org,
        name=name,
        type=type_classifier.classify_type(project_path),
        path=str(project_path),
        hosted=True,
        last_modified=datetime.fromtimestamp(mtime, tz=timezone.utc),
    )


def list_hosted_projects(config: HostingConfig) -> list[ProjectSummary]:
    """Summaries for every hosting config artifact whose project still exists.

    Order follows directory iteration and is not stable across platforms.
    """
    config_dir = config.hosting_config_dir
    if not config_dir.is_dir():
        return []

    projects: list[ProjectSummary] = []
    for entry in config_dir.iterdir():
        if not entry.name.endswith(project_resolver.HOSTING_CONFIG_SUFFIX):
            continue
        try:
            summary = _summarize(config, entry.name)
        except OSError:
            logger.warning("hosting_config_skipped file=%s", entry.name, exc_info=True)
            continue
        if summary is not None:
            projects.append(summary)
    return projects


def _read_sidecar(project_path: Path, filename: str) -> Optional[str]:
    path = project_path / SIDECAR_DIR / filename
    try:
        if not path.is_file():
            return None
        # Decoded leniently: the publish tool owns these files.
        return path.read_bytes().decode("utf-8", errors="replace").strip()
    except OSError:
        logger.warning("sidecar_unreadable path=%s", path, exc_info=True)
        return None


def build_urls(config: HostingConfig, org: str, name: str) -> ProjectUrls:
    base = config.public_base_url
    return ProjectUrls(git=f"{base}/git/{org}/{name}", web=f"{base}/web/{org}/{name}")


def get_status(config: HostingConfig, org: str, name: str) -> StatusRecord:
    project_path = project_resolver.resolve_project(config, org, name)
    if project_path is None:
        raise ProjectNotFoundError()

    hosted = project_resolver.is_hosted(config, org, name)
    build_status = UNKNOWN_BUILD_STATUS
    published_at = None
    # Side-car files are only read for hosted projects.
    if hosted:
        build_status = _read_sidecar(project_path, BUILD_STATUS_FILE) or UNKNOWN_BUILD_STATUS
        published_at = _read_sidecar(project_path, PUBLISHED_AT_FILE)

    return StatusRecord(
        org=org,
        name=name,
        path=str(project_path),
        type=type_classifier.classify_type(project_path),
        hosted=hosted,
        build_status=build_status,
        published_at=published_at,
        urls=build_urls(config, org, name),
    )
