from __future__ import annotations

import pytest

from audit import (
    CollectorRejectionError,
    RequestConstructionError,
    ResponseDecodeError,
    SendError,
    SplunkAuditError,
)


@pytest.mark.parametrize(
    ("error_cls", "kind", "message"),
    [
        (RequestConstructionError, "request_construction", "unable to create request to Splunk"),
        (SendError, "send", "unable to send request to Splunk"),
        (ResponseDecodeError, "response_decode", "unable to unmarshal Splunk response"),
    ],
)
def test_wrapping_errors_carry_kind_message_and_cause(error_cls: type[SplunkAuditError], kind: str, message: str):
    cause = ValueError("boom")

    err = error_cls(cause)

    assert isinstance(err, SplunkAuditError)
    assert err.kind == kind
    assert err.cause is cause
    assert str(err) == f"{message}: boom"


def test_error_without_cause_is_just_the_message():
    assert str(SendError()) == "unable to send request to Splunk"


def test_collector_rejection_includes_code_and_text():
    err = CollectorRejectionError(code=123, text="test")

    assert isinstance(err, SplunkAuditError)
    assert err.code == 123
    assert err.text == "test"
    assert err.cause is None
    assert str(err) == "unable to write to Splunk (code 123: test)"
