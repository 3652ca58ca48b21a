"""
Async client for the Sendamatic transactional email API.

	async with SendamaticClient("user-id", "password") as client:
		msg = (
			Message()
			.set_sender("sender@example.com")
			.add_to("recipient@example.com")
			.set_subject("Hello")
			.set_text_body("Hello World")
		)
		resp = await client.send(msg)
		status, found = resp.get_status("recipient@example.com")
"""
from .client.client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS, ISendamaticClient, SendamaticClient
from .client.options import Option, with_base_url, with_http_client, with_timeout

from .exception import exception_constants
from .exception.error_decoder import decode_error
from .exception.mail_exceptions import (
    APIError,
    MailError,
    MailResponseDecodeError,
    MailResponseReadError,
    MailSendError,
    MailSerializationError,
    MailTimeoutError,
    MailValidationError,
)

from .models.message import Attachment, Header, MAX_RECIPIENTS, Message
from .models.response import SendResponse, decode_send_response

from .core.config import LogLevel, SendamaticSettings
from .core.logging_config import configure_logging

from .test_doubles.client import SpySendamaticClient, StubSendamaticClient


__all__ = [
    
    # client/
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "ISendamaticClient",
    "SendamaticClient",
    "Option",
    "with_base_url",
    "with_http_client",
    "with_timeout",
    
    # exception/
    "exception_constants",
    "decode_error",
    "APIError",
    "MailError",
    "MailResponseDecodeError",
    "MailResponseReadError",
    "MailSendError",
    "MailSerializationError",
    "MailTimeoutError",
    "MailValidationError",
    
    # models/
    "Attachment",
    "Header",
    "MAX_RECIPIENTS",
    "Message",
    "SendResponse",
    "decode_send_response",
    
    # core/
    "LogLevel",
    "SendamaticSettings",
    "configure_logging",
    
    # test_doubles/
    "SpySendamaticClient",
    "StubSendamaticClient",
]
