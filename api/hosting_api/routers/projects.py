"""Project hosting routes forwarded by the reverse proxy.

- /api/project/{org}/{name}/hosting   eligibility check
- /api/project/{org}/{name}/static/*  compiled assets
- /api/project/{org}/{name}/status    hosting and build status
- /api/projects/list                  every hosted project
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import FileResponse

from hosting_api.config import HostingConfig
from hosting_api.models.error import ErrorDetail
from hosting_api.models.project import HostingCheckResult, ProjectListResponse, StatusRecord
from hosting_api.services import hosting_service, static_asset_service
from hosting_api.services.errors import AssetNotFoundError, ProjectNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter()


def get_config(request: Request) -> HostingConfig:
    return request.app.state.config


@router.get(
    "/project/{org}/{name}/hosting",
    response_model=HostingCheckResult,
    response_model_exclude_none=True,
)
async def check_project_hosting(
    org: str, name: str, config: HostingConfig = Depends(get_config)
) -> HostingCheckResult:
    """Whether the project exists and has a hosting config artifact."""
    return hosting_service.check_hosting(config, org, name)


@router.get(
    "/project/{org}/{name}/static/{asset_path:path}",
    response_class=FileResponse,
    responses={404: {"model": ErrorDetail}},
)
async def serve_static_asset(
    org: str, name: str, asset_path: str, config: HostingConfig = Depends(get_config)
) -> FileResponse:
    try:
        asset_file = static_asset_service.serve_asset(config, org, name, asset_path)
    except ProjectNotFoundError as exc:
        logger.info("static_asset_project_unavailable org=%s name=%s reason=%s", org, name, exc)
        raise HTTPException(status_code=404, detail="Asset not found")
    except AssetNotFoundError:
        raise HTTPException(status_code=404, detail="Asset not found")
    return FileResponse(asset_file)


@router.get("/projects/list", response_model=ProjectListResponse)
async def list_hosted_projects(config: HostingConfig = Depends(get_config)) -> ProjectListResponse:
    """Every project with a hosting config artifact whose directory still exists."""
    return ProjectListResponse(projects=hosting_service.list_hosted_projects(config))


@router.get(
    "/project/{org}/{name}/status",
    response_model=StatusRecord,
    responses={404: {"model": ErrorDetail}},
)
async def get_project_status(
    org: str, name: str, config: HostingConfig = Depends(get_config)
) -> StatusRecord:
    try:
        return hosting_service.get_status(config, org, name)
    except ProjectNotFoundError:
        raise HTTPException(status_code=404, detail="Project not found")
