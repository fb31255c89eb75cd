"""Data models for the Splunk audit sink.

`QueryRecord` is what callers hand in; `SplunkEvent` is what goes on the wire;
`CollectorAck` is what the HTTP Event Collector sends back.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class _Model(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class QueryRecord(_Model):
    """One executed query, as reported by the query service."""

    query: str = ""
    user: str = ""
    # Epoch seconds.
    timestamp: int = 0


class SplunkEventData(_Model):
    """The `event` object of a HEC payload.

    Field order is the serialized key order; the collector extracts indexed
    fields by position, so do not reorder.
    """

    query: str
    user: str
    namespace: str
    pod: str


class SplunkEvent(_Model):
    """A complete HEC payload. Field order is the serialized key order."""

    event: SplunkEventData
    sourcetype: str = "json"
    host: str
    time: int


class CollectorAck(_Model):
    """Acknowledgment body returned by the collector.

    HEC answers with lowercase keys (`{"text":"Success","code":0}`); both
    spellings are accepted. Types are strict: `"0"`, `0.0` or `false` is not a
    code.
    """

    code: int = Field(default=0, strict=True, validation_alias=AliasChoices("Code", "code"))
    text: str = Field(default="", strict=True, validation_alias=AliasChoices("Text", "text"))

    @property
    def accepted(self) -> bool:
        """Return True when the collector accepted the event."""
        return self.code == 0
