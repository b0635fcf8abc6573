"""Project models returned by the hosting endpoints.

Field names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ProjectType(str, Enum):
    REACT = "react"
    VUE = "vue"
    NEXTJS = "nextjs"
    NUXT = "nuxt"
    API = "api"
    BUILDABLE = "buildable"
    STATIC = "static"
    BUILT_STATIC = "built-static"
    UNKNOWN = "unknown"


# Types whose served files live in a build output directory.
BROWSER_FRAMEWORK_TYPES = frozenset(
    {ProjectType.REACT, ProjectType.VUE, ProjectType.NEXTJS, ProjectType.NUXT}
)


class HostingReason(str, Enum):
    NOT_FOUND = "not_found"
    NOT_CONFIGURED = "not_configured"


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HostingCheckResult(_WireModel):
    """GET /api/project/{org}/{name}/hosting response."""

    hostable: bool
    org: str
    name: str
    message: str
    reason: Optional[HostingReason] = None
    suggestion: Optional[str] = None
    project_type: Optional[ProjectType] = None
    project_path: Optional[str] = None


class ProjectSummary(_WireModel):
    """One entry of GET /api/projects/list."""

    org: str
    name: str
    type: ProjectType
    path: str
    hosted: bool = True
    last_modified: datetime


class ProjectListResponse(_WireModel):
    projects: list[ProjectSummary] = Field(default_factory=list)


class ProjectUrls(_WireModel):
    git: str
    web: str


class StatusRecord(_WireModel):
    """GET /api/project/{org}/{name}/status response."""

    org: str
    name: str
    path: str
    type: ProjectType
    hosted: bool
    build_status: str = "unknown"
    published_at: Optional[str] = None
    urls: ProjectUrls
