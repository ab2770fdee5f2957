"""
Connect-to-Forge Exception Classes

Custom exceptions for error handling and exit-code mapping in the CLI.
"""

from typing import Any


class ConnectToForgeError(Exception):
    """Base exception for all conversion errors.

    Each subclass declares its own `error_code`. Context values are the
    facts needed to act on the failure (the descriptor URL, the offending
    field) and are rendered after the message, skipping any that are None.
    """

    error_code: str = "CONNECT_TO_FORGE_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = {
            k: v for k, v in context.items() if v is not None
        }

    def __str__(self) -> str:
        text = f"[{self.error_code}] {self.message}"
        if self.context:
            details = "; ".join(f"{k}: {v}" for k, v in self.context.items())
            text = f"{text} ({details})"
        return text

    def get_recovery_hint(self) -> str:
        return "Re-run with --debug for the full log"


class DescriptorDownloadError(ConnectToForgeError):
    """Raised when the Connect descriptor cannot be retrieved."""

    error_code = "DESCRIPTOR_DOWNLOAD_ERROR"

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, url=url or None, status_code=status_code)

    def get_recovery_hint(self) -> str:
        """Provide a helpful hint for fixing the download error."""
        if "status_code" in self.context:
            return (
                "Check that the descriptor URL is publicly reachable and "
                "returns atlassian-connect.json"
            )
        return "Check the descriptor URL and your network connection"


class DescriptorParseError(ConnectToForgeError):
    """Raised when the downloaded descriptor is not a usable Connect descriptor."""

    error_code = "DESCRIPTOR_PARSE_ERROR"

    def __init__(
        self,
        message: str,
        url: str | None = None,
        field_name: str | None = None,
    ) -> None:
        super().__init__(message, url=url or None, field_name=field_name or None)

    def get_recovery_hint(self) -> str:
        """Provide a helpful hint for fixing the parse error."""
        if "field_name" in self.context:
            field = self.context["field_name"]
            return f"Ensure the '{field}' field is present in the Connect descriptor"
        return "Ensure the URL points to a JSON Connect descriptor"


class ConfigurationError(ConnectToForgeError):
    """Raised when settings or command line values are invalid."""

    error_code = "CONFIGURATION_ERROR"

    def __init__(
        self,
        message: str,
        field_name: str | None = None,
        actual_value: Any = None,
    ) -> None:
        super().__init__(
            message,
            field_name=field_name or None,
            actual_value=None if actual_value is None else str(actual_value),
        )


class OperatorAbort(ConnectToForgeError):
    """Raised when the operator chooses to stop the run.

    This is a clean exit: nothing has been written and the CLI returns 0.
    """

    error_code = "OPERATOR_ABORT"

    def __init__(self, message: str = "Aborting as requested!") -> None:
        super().__init__(message)
