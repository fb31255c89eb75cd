"""Builds the HEC envelope for a single query record."""

from __future__ import annotations

from config import SplunkConfig

from .models import QueryRecord, SplunkEvent, SplunkEventData


def build_event(record: QueryRecord, config: SplunkConfig) -> SplunkEvent:
    """Map a query record plus deployment identifiers onto a HEC event.

    No validation: empty strings and a zero timestamp pass through as-is.
    """
    return SplunkEvent(
        event=SplunkEventData(
            query=record.query,
            user=record.user,
            namespace=config.namespace,
            pod=config.pod,
        ),
        host=config.host,
        time=record.timestamp,
    )


def encode_event(event: SplunkEvent) -> bytes:
    """Serialize an event as compact JSON, keys in declaration order."""
    return event.model_dump_json().encode("utf-8")
