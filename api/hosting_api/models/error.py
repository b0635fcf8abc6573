"""Error body shared by the 404 and 500 responses. 422 keeps the FastAPI default."""

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """``{"detail": "Project not found"}`` and the like; never carries a filesystem path."""

    detail: str
