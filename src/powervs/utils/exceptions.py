################################################################################
# © Copyright 2026 Zapata Computing Inc.
################################################################################

"""Custom exceptions for the PowerVS utilities."""

import typing as t

if t.TYPE_CHECKING:
    from .multiworkspace._structs import Workspace


class PowerVSError(Exception):
    """Base class for the errors raised by this package."""

    def __init__(self, message: t.Optional[str] = None):
        super().__init__(message)
        self.message = message


# Config Errors
class ConfigError(PowerVSError):
    """Raised when the supplied configuration is insufficient.

    For example: no authenticator, no workspaces, or a config file that can't be
    read.
    """

    pass


class ValidationError(PowerVSError):
    """Raised when a workspace descriptor is malformed.

    A workspace needs a zone, and at least one of name or ID.
    """

    pass


class AmbiguousError(PowerVSError):
    """Raised when a workspace name matches more than one workspace in a zone."""

    pass


# Generic
class NotFoundError(PowerVSError):
    """Raised when an instance, workspace, DHCP server, lease, or region is not found.

    ``entity`` tells what kind of thing was looked up, ``key`` what it was looked up
    by.
    """

    def __init__(
        self,
        message: t.Optional[str] = None,
        *,
        entity: t.Optional[str] = None,
        key: t.Optional[str] = None,
    ):
        super().__init__(message)
        self.entity = entity
        self.key = key


class WorkspaceRequestError(PowerVSError):
    """Raised when a request against a single workspace fails.

    The underlying transport or API error is chained as ``__cause__``.
    """

    def __init__(self, message: str, workspace: "Workspace"):
        super().__init__(message)
        self.workspace = workspace


class AggregateError(PowerVSError):
    """Raised when a search over several workspaces failed to find a match and at
    least one of the workspaces couldn't be searched.

    It isn't a ``NotFoundError``: the thing we were looking for might
    live in one of the workspaces that errored.
    """  # noqa: D205, D212

    def __init__(self, message: str, errors: t.Sequence[Exception]):
        super().__init__(message)
        self.errors = list(errors)

    def __str__(self):
        return "\n".join([self.message or ""] + [str(e) for e in self.errors])


class ClientCreationError(PowerVSError):
    """Raised when the workspace clients can't be created.

    The underlying error is chained as ``__cause__``.
    """

    pass
