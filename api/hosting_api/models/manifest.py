"""Typed view of a project's ``package.json``."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class PackageManifest(BaseModel):
    """Only the keys classification needs; everything else is ignored.

    Values are kept loose: npm accepts version strings, but hand-written
    manifests also carry objects or numbers, and only the names matter here.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    dependencies: Optional[dict[str, Any]] = None
    dev_dependencies: Optional[dict[str, Any]] = Field(default=None, alias="devDependencies")
    scripts: Optional[dict[str, Any]] = None

    def dependency_names(self) -> set[str]:
        """Runtime and development dependency names merged, skipping empty entries."""
        names: set[str] = set()
        for deps in (self.dependencies, self.dev_dependencies):
            if deps:
                names.update(name for name, version in deps.items() if version)
        return names

    def has_script(self, name: str) -> bool:
        return bool((self.scripts or {}).get(name))
