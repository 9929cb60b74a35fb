"""
Test fixtures package for comment client tests.

- transports.py: fake transports and canned responses

Usage:
    from fixtures import RecordingTransport, make_response

    def test_something():
        transport = RecordingTransport([make_response(200, '{"ok": true}')])
"""

from .transports import (
    RecordingTransport,
    make_response,
)

__all__ = [
    "RecordingTransport",
    "make_response",
]
