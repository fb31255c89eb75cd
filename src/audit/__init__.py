"""Splunk audit sink for executed queries.

`SplunkAudit.write()` sends one query record to a Splunk HTTP Event Collector
and raises a typed `SplunkAuditError` if the event was not accepted.
"""

from .errors import (
    CollectorRejectionError,
    RequestConstructionError,
    ResponseDecodeError,
    SendError,
    SplunkAuditError,
)
from .models import CollectorAck, QueryRecord, SplunkEvent, SplunkEventData
from .splunk import DEFAULT_TIMEOUT, SplunkAudit, default_http_client, with_http_client, with_index, with_timeout

__all__ = [
    "DEFAULT_TIMEOUT",
    "CollectorAck",
    "CollectorRejectionError",
    "QueryRecord",
    "RequestConstructionError",
    "ResponseDecodeError",
    "SendError",
    "SplunkAudit",
    "SplunkAuditError",
    "SplunkEvent",
    "SplunkEventData",
    "default_http_client",
    "with_http_client",
    "with_index",
    "with_timeout",
]
