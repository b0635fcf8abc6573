"""Liveness, readiness and version probes."""

from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, ConfigDict, Field

from hosting_api import __version__
from hosting_api.config import HostingConfig

router = APIRouter()

SERVICE_NAME = "hosting-api"
SERVICE_STARTED_AT = datetime.now(timezone.utc)


def get_config(request: Request) -> HostingConfig:
    return request.app.state.config


def _iso_utc(ts: datetime) -> str:
    return ts.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class HealthResponse(BaseModel):
    """GET /health response."""

    model_config = ConfigDict(extra="forbid")
    status: Annotated[str, Field(description="Always 'healthy'")]
    service: Annotated[str, Field(description="Service name")]
    timestamp: Annotated[str, Field(description="ISO8601 UTC")]


class ReadyResponse(BaseModel):
    """GET /ready response."""

    model_config = ConfigDict(extra="forbid")
    status: Annotated[str, Field(description="Always 'ready'")]
    started_at: Annotated[str, Field(description="ISO8601 UTC when service process started")]
    roots: Annotated[dict[str, bool], Field(description="Whether each configured directory exists")]


@router.get("/health", response_model=HealthResponse)
async def health():
    """Return service liveness."""
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        timestamp=_iso_utc(datetime.now(timezone.utc)),
    )


@router.get("/ready", response_model=ReadyResponse)
async def ready(config: HostingConfig = Depends(get_config)):
    """Readiness probe. 503 until at least one project root is mounted."""
    roots = {
        "projects_root": config.projects_root.is_dir(),
        "workspace_root": config.workspace_root.is_dir(),
        "hosting_config_dir": config.hosting_config_dir.is_dir(),
    }
    if not (roots["projects_root"] or roots["workspace_root"]):
        raise HTTPException(status_code=503, detail="not ready")
    return ReadyResponse(status="ready", started_at=_iso_utc(SERVICE_STARTED_AT), roots=roots)


@router.get("/version")
async def version():
    """Package version of the running hosting API."""
    return {"service": SERVICE_NAME, "version": __version__}
