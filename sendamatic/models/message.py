import base64
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

MAX_RECIPIENTS = 255

RECIPIENT_REQUIRED = "at least one recipient required"
TOO_MANY_RECIPIENTS = f"maximum {MAX_RECIPIENTS} recipients allowed"
SENDER_REQUIRED = "sender is required"
SUBJECT_REQUIRED = "subject is required"
BODY_REQUIRED = "either text body or html body is required"

# Always on the wire, even when empty; everything else is dropped when empty.
_ALWAYS_SENT = frozenset({"to", "sender", "subject"})

_PATH_SEPARATORS = re.compile(r"[/\\]")


class Header(BaseModel):
	header: str = Field(default=..., description="Header name, e.g. 'Reply-To' or 'X-Priority'")
	value: str = Field(default=..., description="Header value")


class Attachment(BaseModel):
	filename: str = Field(default=..., description="File name shown to the recipient")
	data: str = Field(default=..., description="Base64-encoded file content")
	mime_type: str = Field(default=..., serialization_alias="mimetype", description="MIME type, e.g. 'application/pdf'")
	
	def decoded(self) -> bytes:
		return base64.b64decode(self.data)


class Message(BaseModel):
	"""
	An outgoing email, built with chained setters:

		msg = (
			Message()
			.set_sender("sender@example.com")
			.add_to("recipient@example.com")
			.set_subject("Hello")
			.set_text_body("Hello World")
		)

	Setters never validate; call ``validate_for_send`` (the client does it on send).
	"""
	
	to: List[str] = Field(default_factory=list, description="Primary recipients, 1 to 255 addresses")
	cc: List[str] = Field(default_factory=list, description="Carbon copy recipients")
	bcc: List[str] = Field(default_factory=list, description="Blind carbon copy recipients")
	sender: str = Field(default="", description="Sender address")
	subject: str = Field(default="", description="Subject line")
	text_body: str = Field(default="", description="Plain text body")
	html_body: str = Field(default="", description="HTML body")
	headers: List[Header] = Field(default_factory=list, description="Custom headers in insertion order; duplicates allowed")
	attachments: List[Attachment] = Field(default_factory=list, description="Attachments, payload already base64-encoded")
	
	# ---------- Builder ----------
	
	def add_to(self, email: str) -> "Message":
		self.to.append(email)
		return self
	
	def add_cc(self, email: str) -> "Message":
		self.cc.append(email)
		return self
	
	def add_bcc(self, email: str) -> "Message":
		self.bcc.append(email)
		return self
	
	def set_sender(self, email: str) -> "Message":
		self.sender = email
		return self
	
	def set_subject(self, subject: str) -> "Message":
		self.subject = subject
		return self
	
	def set_text_body(self, body: str) -> "Message":
		self.text_body = body
		return self
	
	def set_html_body(self, body: str) -> "Message":
		self.html_body = body
		return self
	
	def add_header(self, name: str, value: str) -> "Message":
		self.headers.append(Header(header=name, value=value))
		return self
	
	def attach_file(self, filename: str, mime_type: str, data: bytes) -> "Message":
		"""Attach raw bytes; they are base64-encoded right away."""
		self.attachments.append(
			Attachment(
				filename=filename,
				data=base64.b64encode(data).decode("ascii"),
				mime_type=mime_type,
			)
		)
		return self
	
	def attach_file_from_path(self, path: str | Path, mime_type: str) -> "Message":
		"""
		Read a file and attach it under its own name.

		The filename is the last segment after either '/' or '\\', so Windows
		style paths give the expected name on any platform. Read errors
		(``FileNotFoundError``, ``PermissionError``, ...) propagate unchanged.
		"""
		raw_path = str(path)
		data = Path(raw_path).read_bytes()
		filename = _PATH_SEPARATORS.split(raw_path)[-1]
		return self.attach_file(filename, mime_type, data)
	
	# ---------- Checks & wire form ----------
	
	def validate_for_send(self) -> Optional[str]:
		"""Return the first rule this message breaks, or None when it can be sent."""
		if not self.to:
			return RECIPIENT_REQUIRED
		if len(self.to) > MAX_RECIPIENTS:
			return TOO_MANY_RECIPIENTS
		if not self.sender:
			return SENDER_REQUIRED
		if not self.subject:
			return SUBJECT_REQUIRED
		if not self.text_body and not self.html_body:
			return BODY_REQUIRED
		return None
	
	def to_wire(self) -> Dict[str, Any]:
		payload = self.model_dump(mode="json", by_alias=True)
		return {k: v for k, v in payload.items() if k in _ALWAYS_SENT or v}
