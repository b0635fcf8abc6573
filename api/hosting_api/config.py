"""Process configuration, read once from the environment at startup."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PROJECTS_ROOT = "/home/developer/code/tfgrid-ai-stack-projects"
DEFAULT_WORKSPACE_ROOT = "/home/developer/code"
DEFAULT_HOSTING_CONFIG_DIR = "/etc/tfgrid-ai-stack/projects"
DEFAULT_PORT = 8081


def _env(name: str, default: str) -> str:
    raw = os.getenv(name, "").strip()
    return raw or default


class HostingConfig(BaseModel):
    """Immutable settings passed explicitly into every router and service."""

    model_config = ConfigDict(frozen=True)

    projects_root: Path = Path(DEFAULT_PROJECTS_ROOT)
    workspace_root: Path = Path(DEFAULT_WORKSPACE_ROOT)
    hosting_config_dir: Path = Path(DEFAULT_HOSTING_CONFIG_DIR)
    host: str = "0.0.0.0"
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    public_base_url: str = "http://localhost"
    publish_command: str = "t publish"
    log_level: str = "INFO"
    allowed_origins: tuple[str, ...] = ()

    @field_validator("public_base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, v: str) -> str:
        return v.upper()

    @classmethod
    def from_env(cls) -> "HostingConfig":
        # PROJECT_WORKSPACE is the variable the publish tooling already exports.
        projects_root = os.getenv("HOSTING_PROJECTS_ROOT", "").strip() or _env(
            "PROJECT_WORKSPACE", DEFAULT_PROJECTS_ROOT
        )
        return cls(
            projects_root=Path(projects_root),
            workspace_root=Path(_env("HOSTING_WORKSPACE_ROOT", DEFAULT_WORKSPACE_ROOT)),
            hosting_config_dir=Path(_env("HOSTING_CONFIG_DIR", DEFAULT_HOSTING_CONFIG_DIR)),
            host=_env("HOSTING_API_HOST", "0.0.0.0"),
            port=_env("HOSTING_API_PORT", str(DEFAULT_PORT)),
            public_base_url=_env("HOSTING_PUBLIC_BASE_URL", "http://localhost"),
            publish_command=_env("HOSTING_PUBLISH_COMMAND", "t publish"),
            log_level=_env("HOSTING_API_LOG_LEVEL", "INFO"),
            allowed_origins=tuple(
                origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "").split(",") if origin.strip()
            ),
        )

    @property
    def search_roots(self) -> tuple[Path, Path]:
        """Project roots in lookup order."""
        return (self.projects_root, self.workspace_root)
