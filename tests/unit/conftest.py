from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _no_threads_in_unit_tests(monkeypatch: pytest.MonkeyPatch):
    """Run `asyncio.to_thread` inline for unit tests.

    `SplunkAudit.awrite` hands the blocking write to a worker thread. In unit
    tests the fake session answers immediately, so run it inline and keep the
    default threadpool out of the picture.
    """

    async def _to_thread(func, /, *args, **kwargs):  # noqa: ANN001, D401
        return func(*args, **kwargs)

    monkeypatch.setattr("audit.splunk.asyncio.to_thread", _to_thread)
    yield
