import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from sendamatic.exception.mail_exceptions import APIError

logger = logging.getLogger(__name__)


class APIErrorPayload(BaseModel):
	"""Error body as sent by the service. ``null`` values count as absent; no type coercion."""
	model_config = ConfigDict(extra="ignore", strict=True)
	
	error: Optional[str] = None
	validation_errors: Optional[str] = None
	json_path: Optional[str] = None
	sender: Optional[str] = None
	smtp_code: Optional[int] = None


def _as_text(body: bytes | str) -> str:
	if isinstance(body, bytes):
		return body.decode("utf-8", errors="replace")
	return body


def decode_error(status_code: int, body: bytes | str) -> APIError:
	"""
	Turn a status >= 400 response body into an APIError. Never raises.

	A body that is not a JSON object of the expected shape becomes the error
	message verbatim; the status code always comes from the argument.
	"""
	text = _as_text(body)
	try:
		payload = APIErrorPayload.model_validate_json(text)
	except ValidationError:
		logger.debug(f"Non-JSON error body for status {status_code}, using raw text")
		return APIError(status_code=status_code, message=text)
	
	return APIError(
		status_code=status_code,
		message=payload.error or "",
		validation_errors=payload.validation_errors or "",
		json_path=payload.json_path or "",
		sender=payload.sender or "",
		smtp_code=payload.smtp_code or 0,
	)
