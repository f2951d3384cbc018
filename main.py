"""Entry point for the record constructor CLI.

Run with:
    python main.py <name> <age>

The script configures logging, validates the two positional arguments,
prints the resulting record, and exits with status 0 on success or 1 on
any failure (including a wrong number of arguments).
"""

import datetime
import json
import logging
import os
import sys
import time
import uuid
from typing import Sequence

from record_constructor import RecordError, construct
from record_constructor.config import settings

logger: logging.Logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Configure logging from ``settings.log_format`` and ``settings.log_level``.

    LOG_FORMAT=json gives one JSON object per line.  Any other value (or
    absent) falls back to human-readable plaintext.
    """
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    if settings.log_format.lower() == "json":
        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload: dict = {
                    "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
                    "level": record.levelname,
                    "logger": record.name,
                    "message": record.getMessage(),
                }
                # Merge any extra fields passed via logger.info(..., extra={...})
                for key, value in record.__dict__.items():
                    if key not in logging.LogRecord.__dict__ and not key.startswith("_"):
                        payload[key] = value
                return json.dumps(payload, default=str)

        handler = logging.StreamHandler()
        handler.setFormatter(_JsonFormatter())
        logging.basicConfig(level=level, handlers=[handler], force=True)
    else:
        logging.basicConfig(
            level=level,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )


def _print_usage() -> None:
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "main.py"
    print(f"usage: {prog} <name> <age>", file=sys.stderr)


def run(argv: Sequence[str] | None = None) -> int:
    """Build a record from ``argv`` (name, age) and report the outcome.

    Arguments are taken verbatim, so values starting with ``-`` are a name
    or an age like any other.  Returns the process exit status: 0 when the
    record was built, 1 when construction failed or the argument count is
    not exactly two (in which case ``construct`` is never called).

    After every construction attempt a structured audit record is emitted
    via ``logger.info`` containing session_id, timestamp (ISO UTC),
    elapsed_ms, status, error_kind and the name length.  Raw inputs are
    intentionally excluded.
    """
    _configure_logging()

    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        _print_usage()
        return 1
    name, age_input = args

    session_id = str(uuid.uuid4())
    start = time.monotonic()
    status = "success"
    error_kind: str | None = None
    try:
        record = construct(name, age_input)
    except RecordError as exc:
        status = "error"
        error_kind = exc.kind.value
        print(f"ERROR: failed: {exc.message}", file=sys.stderr)
    else:
        print(f"Record: {record}")
    finally:
        elapsed_ms = (time.monotonic() - start) * 1000
        logger.info(
            "record_construction",
            extra={
                "session_id": session_id,
                "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
                "elapsed_ms": round(elapsed_ms, 1),
                "status": status,
                "error_kind": error_kind,
                "name_length": len(name),
            },
        )

    return 0 if status == "success" else 1


def main() -> None:
    """Console-script entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
