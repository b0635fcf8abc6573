"""Project type detection from the dependency manifest and directory layout."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from hosting_api.models.manifest import PackageManifest
from hosting_api.models.project import ProjectType

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"
HTML_ENTRY = "index.html"
BUILD_OUTPUT_DIRS = ("dist", "build")
SINGLE_FILE_COMPONENT_SUFFIX = ".vue"

# Checked top to bottom; the first rule with a matching dependency wins.
FRAMEWORK_MARKERS: tuple[tuple[ProjectType, frozenset[str]], ...] = (
    (ProjectType.REACT, frozenset({"react", "react-dom", "react-router"})),
    (ProjectType.VUE, frozenset({"vue", "nuxt"})),
    (ProjectType.NEXTJS, frozenset({"next"})),
    (ProjectType.API, frozenset({"express"})),
)
VUE_SCOPE_PREFIX = "@vue/"


def load_manifest(project_path: Path) -> Optional[PackageManifest]:
    """Parse ``package.json``; a missing or malformed manifest returns None."""
    manifest_path = project_path / MANIFEST_FILENAME
    if not manifest_path.is_file():
        return None
    try:
        with manifest_path.open(encoding="utf-8") as f:
            data = json.load(f)
        return PackageManifest.model_validate(data)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
        logger.warning(
            "manifest_malformed path=%s error=%s", manifest_path, exc.__class__.__name__
        )
        return None


def _classify_manifest(manifest: PackageManifest) -> Optional[ProjectType]:
    names = manifest.dependency_names()
    for project_type, markers in FRAMEWORK_MARKERS:
        if names & markers:
            return project_type
        if project_type is ProjectType.VUE and any(n.startswith(VUE_SCOPE_PREFIX) for n in names):
            return project_type
    if manifest.has_script("build"):
        return ProjectType.BUILDABLE
    return None


def _has_html_entry(project_path: Path) -> bool:
    return (project_path / HTML_ENTRY).is_file() or (project_path / "public" / HTML_ENTRY).is_file()


def _has_build_output(project_path: Path) -> bool:
    return any((project_path / d).is_dir() for d in BUILD_OUTPUT_DIRS)


def _has_single_file_components(project_path: Path) -> bool:
    return any(
        entry.suffix == SINGLE_FILE_COMPONENT_SUFFIX and entry.is_file()
        for entry in project_path.iterdir()
    )


def classify_type(project_path: Path) -> ProjectType:
    """Classify a project directory. Reads only; the result reflects the current filesystem."""
    if not project_path.is_dir():
        return ProjectType.UNKNOWN

    manifest = load_manifest(project_path)
    if manifest is not None:
        detected = _classify_manifest(manifest)
        if detected is not None:
            return detected

    if _has_html_entry(project_path):
        return ProjectType.STATIC
    if _has_build_output(project_path):
        return ProjectType.BUILT_STATIC
    if _has_single_file_components(project_path):
        return ProjectType.VUE
    return ProjectType.UNKNOWN
