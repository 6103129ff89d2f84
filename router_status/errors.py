"""
Error taxonomy for router status reads.

Every failure is raised straight to the caller.  The API layer decides how to
present it; nothing below it retries or recovers.

  ConfigurationError   project, region or router name could not be resolved,
                       or the configuration map does not fit the schema
  RemoteError          the Compute API call failed (not found, auth, quota,
                       network)
  SchemaWriteError     an attribute write was rejected by the schema; this is
                       a programming defect, not a user error
"""

from typing import Optional


class RouterStatusError(Exception):
    """Base class for all data source errors."""


class ConfigurationError(RouterStatusError):
    pass


class RemoteError(RouterStatusError):
    """A failed call to the Compute API, message kept verbatim."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def not_found(self) -> bool:
        return self.status_code == 404


class SchemaWriteError(RouterStatusError):
    pass
