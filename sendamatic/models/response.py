import logging
import math
from typing import Any, Dict, Tuple

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from sendamatic.exception import exception_constants
from sendamatic.exception.mail_exceptions import MailResponseDecodeError

logger = logging.getLogger(__name__)

# Each slot is kept as decoded: the status is usually a number and the id
# usually a string, but neither is guaranteed.
RecipientOutcome = Tuple[Any, Any]

_RECIPIENTS_ADAPTER = TypeAdapter(Dict[str, RecipientOutcome])


class SendResponse(BaseModel):
	"""
	Result of an accepted send call.

	``status_code`` is the envelope status; ``recipients`` maps each address
	to its raw ``(status, message_id)`` pair. A 200 can still carry rejected
	recipients, so check them one by one with ``get_status``.
	"""
	
	status_code: int = Field(default=..., description="HTTP status of the send call")
	recipients: Dict[str, RecipientOutcome] = Field(
		default_factory=dict, description="Recipient address -> (status, message id) as returned by the API"
	)
	
	def is_success(self) -> bool:
		# Only 200 exactly; the API answers 200 whenever it accepts the message.
		return self.status_code == 200
	
	def get_status(self, email: str) -> Tuple[int, bool]:
		"""Delivery status for one recipient, truncated to int. ``(0, False)`` when absent or not numeric."""
		info = self.recipients.get(email)
		if info is None:
			return 0, False
		
		status = info[0]
		if isinstance(status, bool) or not isinstance(status, (int, float)):
			return 0, False
		if isinstance(status, float) and not math.isfinite(status):
			return 0, False
		return int(status), True
	
	def get_message_id(self, email: str) -> Tuple[str, bool]:
		"""Provider message id for one recipient. ``("", False)`` when absent or not a string."""
		info = self.recipients.get(email)
		if info is None:
			return "", False
		
		msg_id = info[1]
		if not isinstance(msg_id, str):
			return "", False
		return msg_id, True


def decode_send_response(status_code: int, body: bytes | str) -> SendResponse:
	"""
	Decode a success-status body of the form ``{"<address>": [status, id], ...}``.

	Raises MailResponseDecodeError when the body is not a JSON object or a value
	is not a two-element array. Element types are not checked here.
	"""
	try:
		recipients = _RECIPIENTS_ADAPTER.validate_json(body)
	except ValidationError as e:
		raise MailResponseDecodeError(
			exception_constants.RESPONSE_UNMARSHAL_FAILED.format(status_code=status_code)
		) from e
	
	logger.debug(f"Decoded send response (status {status_code}) for {len(recipients)} recipient(s)")
	return SendResponse(status_code=status_code, recipients=recipients)
