"""Errors raised by `SplunkAudit.write`.

Each error carries a stable `kind` tag and the underlying cause (if any), so
callers can branch on the class, on `kind`, or on the message text. None of
them are retried here; the sink stays usable after any of them.
"""

from __future__ import annotations


class SplunkAuditError(RuntimeError):
    """Base class for every failure on the audit write path."""

    kind: str = "unknown"
    message: str = "unable to audit query in Splunk"

    def __init__(self, cause: BaseException | None = None, *, detail: str | None = None):
        """Create an error wrapping `cause` (exception chaining is set by `raise ... from`)."""
        self.cause = cause
        self.detail = detail
        text = self.message
        if detail:
            text = f"{text} ({detail})"
        if cause is not None:
            text = f"{text}: {cause}"
        super().__init__(text)


class RequestConstructionError(SplunkAuditError):
    """The configured endpoint cannot be turned into an HTTP request."""

    kind = "request_construction"
    message = "unable to create request to Splunk"


class SendError(SplunkAuditError):
    """The request could not be delivered (no endpoint, unreachable host, timeout)."""

    kind = "send"
    message = "unable to send request to Splunk"


class ResponseDecodeError(SplunkAuditError):
    """The collector's acknowledgment is not valid JSON of the expected shape."""

    kind = "response_decode"
    message = "unable to unmarshal Splunk response"


class CollectorRejectionError(SplunkAuditError):
    """The collector answered with a non-zero code."""

    kind = "collector_rejection"
    message = "unable to write to Splunk"

    def __init__(self, *, code: int, text: str):
        """Create an error capturing the collector's code and text."""
        self.code = code
        self.text = text
        super().__init__(detail=f"code {code}: {text}")
