"""Pydantic models."""

from hosting_api.models.error import ErrorDetail
from hosting_api.models.manifest import PackageManifest
from hosting_api.models.project import (
    HostingCheckResult,
    HostingReason,
    ProjectListResponse,
    ProjectSummary,
    ProjectType,
    ProjectUrls,
    StatusRecord,
)

__all__ = [
    "ErrorDetail",
    "HostingCheckResult",
    "HostingReason",
    "PackageManifest",
    "ProjectListResponse",
    "ProjectSummary",
    "ProjectType",
    "ProjectUrls",
    "StatusRecord",
]
