from typing import TYPE_CHECKING, Callable

import httpx

if TYPE_CHECKING:
	from sendamatic.client.client import SendamaticClient

Option = Callable[["SendamaticClient"], None]
"""Mutates a client during construction. Options run in order, so the last one wins."""


def with_base_url(base_url: str) -> Option:
	"""Point the client at another endpoint, e.g. a sandbox or a local fake."""
	
	def _apply(client: "SendamaticClient") -> None:
		client.base_url = base_url
	
	return _apply


def with_http_client(http_client: httpx.AsyncClient) -> Option:
	"""
	Replace the transport wholesale.

	Anything an earlier option set (such as the timeout) is discarded: the
	given client's own per-phase timeouts apply and no overall deadline is
	kept. The client will not close a transport it was given.
	"""
	
	def _apply(client: "SendamaticClient") -> None:
		client.http_client = http_client
		client.owns_http_client = False
		client.deadline = None
	
	return _apply


def with_timeout(seconds: float | None) -> Option:
	"""
	Set the overall deadline of each send call, in seconds. The same value
	goes to the per-phase timeouts of the transport in place when the option
	runs. None disables both.
	"""
	
	def _apply(client: "SendamaticClient") -> None:
		client.deadline = seconds
		client.http_client.timeout = httpx.Timeout(seconds)
	
	return _apply
