"""Receipt reporter factory.

Provides get_reporter() / set_reporter() to swap implementations:
- LogReporter (default) emits structlog events
- ConsoleReporter prints plain text, used by the demo
- FakeReporter records output for tests

The default can be changed with the RECEIPT_REPORTER environment variable
("log" or "console").
"""

import os

from storefront.reporting.port import ReceiptReporter

_current_reporter: ReceiptReporter | None = None


def get_reporter() -> ReceiptReporter:
    """Return the current receipt reporter."""
    global _current_reporter
    if _current_reporter is None:
        adapter = os.environ.get("RECEIPT_REPORTER", "log")
        if adapter == "log":
            from storefront.reporting.log_adapter import LogReporter

            _current_reporter = LogReporter()
        elif adapter == "console":
            from storefront.reporting.console_adapter import ConsoleReporter

            _current_reporter = ConsoleReporter()
        else:
            raise ValueError(f"Unknown receipt reporter: {adapter}")
    return _current_reporter


def set_reporter(reporter: ReceiptReporter) -> None:
    """Override the active reporter (useful for tests and the demo)."""
    global _current_reporter
    _current_reporter = reporter


def reset_reporter() -> None:
    """Reset to the configured default reporter."""
    global _current_reporter
    _current_reporter = None
