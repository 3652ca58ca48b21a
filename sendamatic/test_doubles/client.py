from collections import deque

from sendamatic.client.client import ISendamaticClient
from sendamatic.exception.mail_exceptions import MailError, MailValidationError
from sendamatic.models.message import Message
from sendamatic.models.response import SendResponse


class SendRecorder:
    """
    Logs every send attempt as ``(message, timeout)`` and replays queued
    failures, one per attempt, before the double does any work.
    """

    def __init__(self) -> None:
        self.send_calls: list[tuple[Message, float | None]] = []
        self._planned_failures: deque[MailError] = deque()

    def fail_next_send(self, *errors: MailError) -> None:
        """Queue errors (e.g. an APIError or MailSendError) for the next sends, in order."""
        self._planned_failures.extend(errors)

    def _record_send(self, message: Message, timeout: float | None) -> None:
        self.send_calls.append((message, timeout))
        if self._planned_failures:
            raise self._planned_failures.popleft()


class SpySendamaticClient(SendRecorder, ISendamaticClient):
    """Wraps a real ISendamaticClient to spy on sends and optionally inject failures."""

    def __init__(self, inner: ISendamaticClient) -> None:
        super().__init__()
        self.inner = inner

        self.captured_messages: list[Message] = []
        self.returned_responses: list[SendResponse] = []

    async def send(self, message: Message, timeout: float | None = None) -> SendResponse:
        self._record_send(message, timeout)
        self.captured_messages.append(message)
        out = await self.inner.send(message, timeout=timeout)
        self.returned_responses.append(out)
        return out


class StubSendamaticClient(SendRecorder, ISendamaticClient):
    """
    In-memory stand-in that never touches the network.

    Every recipient in ``to``/``cc``/``bcc`` gets ``[status, "stub-<n>"]`` with
    ``status`` taken from ``recipient_statuses`` (default 200). Validation still
    runs, so invalid messages fail the same way they would against the API.
    """

    def __init__(self, recipient_statuses: dict[str, int] | None = None, status_code: int = 200) -> None:
        super().__init__()
        self.recipient_statuses = recipient_statuses or {}
        self.status_code = status_code
        self.sent: list[Message] = []
        self._counter = 0

    async def send(self, message: Message, timeout: float | None = None) -> SendResponse:
        self._record_send(message, timeout)
        violation = message.validate_for_send()
        if violation is not None:
            raise MailValidationError(violation)

        self.sent.append(message)
        recipients = {}
        for email in [*message.to, *message.cc, *message.bcc]:
            self._counter += 1
            recipients[email] = (self.recipient_statuses.get(email, 200), f"stub-{self._counter}")
        return SendResponse(status_code=self.status_code, recipients=recipients)
