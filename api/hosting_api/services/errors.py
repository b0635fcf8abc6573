"""Domain errors raised by the hosting services.

Routers map every ``ProjectNotFoundError`` and ``AssetNotFoundError`` to 404.
Messages are safe to return to clients and never contain filesystem paths.
"""


class HostingError(RuntimeError):
    pass


class ProjectNotFoundError(HostingError):
    def __init__(self, message: str = "Project not found") -> None:
        super().__init__(message)


class InvalidProjectIdentityError(ProjectNotFoundError):
    """Organization or name is not a plain path segment."""


class ProjectNotHostedError(ProjectNotFoundError):
    def __init__(self, message: str = "Project not hosted") -> None:
        super().__init__(message)


class AssetNotFoundError(HostingError):
    def __init__(self, message: str = "Asset not found") -> None:
        super().__init__(message)
