from typing import Any, Dict, Optional

from sendamatic.exception import exception_constants


class MailError(RuntimeError):
    """Base class for all mail-layer errors."""

class MailValidationError(MailError):
    """Message failed the pre-send checks; raised before any I/O."""

    def __init__(self, violation: str):
        super().__init__(exception_constants.VALIDATION_FAILED.format(violation=violation))
        self.violation = violation

class MailSerializationError(MailError):
    """Message could not be encoded to its wire form."""

class MailSendError(MailError):
    """Transport failure (connect, DNS, TLS, protocol)."""

class MailTimeoutError(MailSendError):
    """The caller's deadline or the transport timeout expired."""

class MailResponseReadError(MailSendError):
    """Response headers arrived but the body could not be read."""

class MailResponseDecodeError(MailError):
    """A success-status body did not have the recipient -> [status, id] shape."""


class APIError(MailError):
    """
    Structured rejection returned by the service on status >= 400.

    ``status_code`` comes from the HTTP status line, never from the body.
    ``sender`` and ``smtp_code`` are kept as data only; they are not part of
    the formatted message.
    """

    def __init__(
            self,
            status_code: int,
            message: str = "",
            validation_errors: str = "",
            json_path: str = "",
            sender: str = "",
            smtp_code: int = 0,
    ):
        self.status_code = status_code
        self.message = message
        self.validation_errors = validation_errors
        self.json_path = json_path
        self.sender = sender
        self.smtp_code = smtp_code
        super().__init__(self._format())

    def _format(self) -> str:
        if self.validation_errors:
            return exception_constants.API_ERROR_WITH_VALIDATION.format(
                status_code=self.status_code,
                validation_errors=self.validation_errors,
                json_path=self.json_path,
            )
        return exception_constants.API_ERROR.format(status_code=self.status_code, message=self.message)

    def __str__(self) -> str:
        return self._format()

    def __repr__(self) -> str:
        return f"APIError(status_code={self.status_code!r}, message={self.message!r})"

    def to_dict(self) -> Dict[str, Any]:
        """Wire shape of the error body; empty optional fields are omitted."""
        data: Dict[str, Any] = {"error": self.message}
        optional: Dict[str, Optional[Any]] = {
            "validation_errors": self.validation_errors,
            "json_path": self.json_path,
            "sender": self.sender,
            "smtp_code": self.smtp_code,
        }
        data.update({k: v for k, v in optional.items() if v})
        return data
