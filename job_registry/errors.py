"""Errors raised by registry operations."""


class RegistryError(Exception):
    """Base class for rejected registry operations."""


class AuthorizationError(RegistryError):
    """The caller is not allowed to perform the operation."""


class NotFoundError(RegistryError):
    """The requested applicant or job id does not exist."""


class PreconditionError(RegistryError):
    """A business rule rejected the operation."""
