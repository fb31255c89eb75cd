"""Demo entrypoint that writes a single audit event to Splunk.

Loads configuration from the environment (and `.env`), builds the sink and
sends one query record taken from the command line:

    python src/main.py "select 1;" alice

It is a manual integration harness, not part of the query service itself.
"""

from __future__ import annotations

import logging
import sys
import time

from audit import QueryRecord, SplunkAudit, SplunkAuditError
from config import load_config


def main(argv: list[str] | None = None) -> int:
    """Send one audit event and return a process exit code."""
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    query = args[0] if args else "select 1;"
    user = args[1] if len(args) > 1 else "gabi"

    config = load_config()
    sink = SplunkAudit(config.splunk)
    record = QueryRecord(query=query, user=user, timestamp=int(time.time()))

    try:
        sink.write(record)
    except SplunkAuditError as exc:
        print(f"[audit] failed ({exc.kind}): {exc}")
        return 1

    print(f"[audit] wrote query for {user!r} to {config.splunk.endpoint}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
