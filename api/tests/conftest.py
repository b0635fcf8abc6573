"""Pytest configuration and fixtures.

Every test gets its own projects root, workspace root and hosting config
directory under ``tmp_path`` plus an app built against them.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Callable, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from hosting_api.config import HostingConfig  # noqa: E402
from hosting_api.main import create_app  # noqa: E402


def write_tree(root: Path, files: dict[str, object]) -> None:
    """Create files under root. dict values are written as JSON, None makes a directory."""
    for relative, content in files.items():
        target = root / relative
        if content is None:
            target.mkdir(parents=True, exist_ok=True)
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, dict):
            target.write_text(json.dumps(content), encoding="utf-8")
        elif isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_text(str(content), encoding="utf-8")


@pytest.fixture
def config(tmp_path: Path) -> HostingConfig:
    projects = tmp_path / "projects"
    workspace = tmp_path / "workspace"
    hosting = tmp_path / "hosting"
    for directory in (projects, workspace, hosting):
        directory.mkdir()
    return HostingConfig(
        projects_root=projects,
        workspace_root=workspace,
        hosting_config_dir=hosting,
        public_base_url="http://hosting.test/",
    )


@pytest.fixture
def make_project(config: HostingConfig) -> Callable[..., Path]:
    def _make(
        name: str,
        files: Optional[dict[str, object]] = None,
        *,
        org: str = "acme",
        hosted: bool = False,
        in_workspace: bool = False,
    ) -> Path:
        root = config.workspace_root if in_workspace else config.projects_root
        project = root / name
        project.mkdir(parents=True, exist_ok=True)
        write_tree(project, files or {})
        if hosted:
            (config.hosting_config_dir / f"{org}-{name}.conf").write_text("server {}\n", encoding="utf-8")
        return project

    return _make


@pytest_asyncio.fixture
async def client(config: HostingConfig):
    """ASGI client with raise_app_exceptions=False so 5xx return a response body."""
    app = create_app(config)
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def tree() -> Callable[[Path, dict[str, object]], None]:
    return write_tree
