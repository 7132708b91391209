"""
Error types raised by pstore components.

Components raise these and never terminate the process themselves; the CLI
dispatcher is the only place that turns them into an exit status.
"""


class PStoreError(Exception):
    """Base class for all pstore errors."""


class ValidationError(PStoreError):
    """A required argument is missing or invalid."""


class CredentialError(PStoreError):
    """Credentials for the requested profile or role could not be set up."""


class RemoteCallError(PStoreError):
    """A Parameter Store API call failed."""

    def __init__(self, operation: str, message: str):
        super().__init__(message)
        self.operation = operation
        self.message = message


class EncodingError(PStoreError):
    """Rendering the parameter list to the output format failed."""
