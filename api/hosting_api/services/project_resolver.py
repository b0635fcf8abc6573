"""Project identity validation and on-disk location lookup."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from hosting_api.config import HostingConfig
from hosting_api.services.errors import InvalidProjectIdentityError

HOSTING_CONFIG_SUFFIX = ".conf"

_FORBIDDEN_SEQUENCES = ("..", "/", "\\", "\x00")


def is_safe_segment(value: str) -> bool:
    """True when value can be used as a single path component."""
    if not value or value == ".":
        return False
    return not any(seq in value for seq in _FORBIDDEN_SEQUENCES)


def validate_identity(org: str, name: str) -> None:
    if not (is_safe_segment(org) and is_safe_segment(name)):
        raise InvalidProjectIdentityError()


def resolve_project(config: HostingConfig, org: str, name: str) -> Optional[Path]:
    """Return the project directory, checking the projects root before the workspace root.

    The organization is validated but does not take part in the lookup, so two
    organizations with a project of the same name resolve to the same directory.
    """
    validate_identity(org, name)
    for root in config.search_roots:
        candidate = root / name
        try:
            found = candidate.is_dir()
        except OSError:
            # ENAMETOOLONG: no such project can exist.
            continue
        if found:
            return candidate.absolute()
    return None


def hosting_config_path(config: HostingConfig, org: str, name: str) -> Path:
    validate_identity(org, name)
    return config.hosting_config_dir / f"{org}-{name}{HOSTING_CONFIG_SUFFIX}"


def is_hosted(config: HostingConfig, org: str, name: str) -> bool:
    try:
        return hosting_config_path(config, org, name).is_file()
    except OSError:
        return False
