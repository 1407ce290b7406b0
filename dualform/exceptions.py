"""Exception hierarchy.

Startup errors stop the process before the server accepts requests. Request
errors are turned into an HTTP response and the server keeps serving.
"""


class StartupError(Exception):
    """A condition that prevents the server from starting."""


class ConfigurationError(StartupError):
    """A required configuration value is missing or invalid."""

    def __init__(self, key: str, message: str):
        super().__init__(message)
        self.key = key


class DatabaseConnectionError(StartupError):
    """A database target could not be opened or did not answer a ping."""

    def __init__(self, prefix: str, message: str):
        super().__init__(message)
        self.prefix = prefix


class SchemaCreationError(StartupError):
    """The users table could not be created."""

    def __init__(self, prefix: str, message: str):
        super().__init__(message)
        self.prefix = prefix


class FormParseError(ValueError):
    """The request body is not valid URL-encoded form data."""


class DualWriteError(Exception):
    """One of the two inserts of a submission failed."""

    message = "Failed to store data"

    def __init__(self, target: str, cause: Exception):
        super().__init__(f"{self.message}: {cause}")
        self.target = target
        self.cause = cause


class PrimaryWriteError(DualWriteError):
    """Insert into the primary database failed; nothing was written."""

    message = "Failed to store data in RDS"


class SecondaryWriteError(DualWriteError):
    """Insert into the secondary database failed after the primary succeeded."""

    message = "Failed to store data in local DB"
