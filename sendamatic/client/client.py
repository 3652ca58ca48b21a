import asyncio
import json
import logging
from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol

import httpx

from sendamatic.client.options import Option, with_base_url, with_timeout
from sendamatic.exception import exception_constants
from sendamatic.exception.error_decoder import decode_error
from sendamatic.exception.mail_exceptions import MailResponseReadError, MailSendError, MailSerializationError, \
	MailTimeoutError, MailValidationError
from sendamatic.models.message import Message
from sendamatic.models.response import SendResponse, decode_send_response

if TYPE_CHECKING:
	from sendamatic.core.config import SendamaticSettings

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://send.api.sendamatic.net"
DEFAULT_TIMEOUT_SECONDS = 30.0


class ISendamaticClient(Protocol):
	@abstractmethod
	async def send(self, message: Message, timeout: float | None = None) -> SendResponse: ...


class SendamaticClient(ISendamaticClient):
	"""
	Async client for the Sendamatic send API.

	One instance can serve concurrent ``send`` calls; the only shared state is
	the httpx connection pool. Use it as an async context manager (or call
	``aclose``) to release connections of a transport it created.
	"""
	
	def __init__(self, user_id: str, password: str, *options: Option):
		self._api_key = f"{user_id}-{password}"
		self.base_url = DEFAULT_BASE_URL
		self.http_client = httpx.AsyncClient(timeout=DEFAULT_TIMEOUT_SECONDS)
		self.owns_http_client = True
		# Bounds the whole exchange, body included; httpx timeouts are per phase.
		self.deadline: float | None = DEFAULT_TIMEOUT_SECONDS
		
		for option in options:
			option(self)
	
	@classmethod
	def from_settings(cls, settings: "SendamaticSettings", *options: Option) -> "SendamaticClient":
		"""Build a client from settings; explicit ``options`` run after the settings-derived ones."""
		return cls(
			settings.USER_ID,
			settings.PASSWORD,
			with_base_url(settings.BASE_URL),
			with_timeout(settings.TIMEOUT),
			*options,
		)
	
	@property
	def api_key(self) -> str:
		return self._api_key
	
	@property
	def timeout(self) -> httpx.Timeout:
		return self.http_client.timeout
	
	async def aclose(self) -> None:
		if self.owns_http_client:
			await self.http_client.aclose()
	
	async def __aenter__(self) -> "SendamaticClient":
		return self
	
	async def __aexit__(self, *exc_info) -> None:
		await self.aclose()
	
	# ---------- Internal operations ----------
	
	def _effective_deadline(self, timeout: float | None) -> float | None:
		candidates = [t for t in (timeout, self.deadline) if t is not None]
		return min(candidates) if candidates else None
	
	def _encode(self, message: Message) -> bytes:
		try:
			return json.dumps(message.to_wire()).encode("utf-8")
		except (TypeError, ValueError) as e:
			raise MailSerializationError(exception_constants.SERIALIZATION_FAILED) from e
	
	def _build_request(self, payload: bytes) -> httpx.Request:
		url = f"{self.base_url}/send"
		try:
			return self.http_client.build_request(
				"POST",
				url,
				content=payload,
				headers={"Content-Type": "application/json", "x-api-key": self._api_key},
			)
		except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
			raise MailSendError(exception_constants.REQUEST_BUILD_FAILED.format(url=url)) from e
	
	async def _dispatch(self, request: httpx.Request) -> SendResponse:
		url = str(request.url)
		try:
			response = await self.http_client.send(request, stream=True)
		except httpx.TimeoutException as e:
			logger.error(f"Sendamatic request to {url} timed out: {e!r}")
			raise MailTimeoutError(exception_constants.REQUEST_TIMED_OUT.format(url=url)) from e
		except httpx.HTTPError as e:
			logger.error(f"Sendamatic request to {url} failed: {e!r}")
			raise MailSendError(exception_constants.REQUEST_FAILED.format(url=url)) from e
		
		# The whole body is read before the status is looked at.
		try:
			body = await response.aread()
		except httpx.HTTPError as e:
			raise MailResponseReadError(
				exception_constants.RESPONSE_READ_FAILED.format(status_code=response.status_code)
			) from e
		finally:
			await response.aclose()
		
		if response.status_code >= 400:
			api_error = decode_error(response.status_code, body)
			logger.warning(f"Sendamatic rejected the message: {api_error}")
			raise api_error
		
		return decode_send_response(response.status_code, body)
	
	# ---------- Send ----------
	
	async def send(self, message: Message, timeout: float | None = None) -> SendResponse:
		"""
		Validate, encode and POST ``message``; issues at most one request.

		``timeout`` is the caller's deadline in seconds for the whole call. The
		call ends at the earlier of it and the client deadline set by
		``with_timeout`` (30s by default). Raises:
		  - MailValidationError before any I/O when the message is not sendable
		  - MailTimeoutError when the deadline or the transport timeout expires
		  - MailSendError / MailResponseReadError on other transport failures
		  - APIError when the service answers with status >= 400
		  - MailResponseDecodeError when a success body has an unexpected shape
		Cancelling the awaiting task raises ``asyncio.CancelledError`` as usual.
		"""
		violation = message.validate_for_send()
		if violation is not None:
			raise MailValidationError(violation)
		
		payload = self._encode(message)
		request = self._build_request(payload)
		
		logger.debug(
			f"Sending message (to={len(message.to)}, cc={len(message.cc)}, bcc={len(message.bcc)}, "
			f"attachments={len(message.attachments)}) to {request.url}"
		)
		
		deadline = self._effective_deadline(timeout)
		if deadline is None:
			result = await self._dispatch(request)
		else:
			try:
				result = await asyncio.wait_for(self._dispatch(request), timeout=deadline)
			except asyncio.TimeoutError as e:
				logger.error(f"Sendamatic request to {request.url} exceeded its {deadline}s deadline")
				raise MailTimeoutError(
					exception_constants.REQUEST_DEADLINE_EXCEEDED.format(seconds=deadline, url=request.url)
				) from e
		
		logger.debug(f"Sendamatic accepted the request with status {result.status_code}")
		return result
