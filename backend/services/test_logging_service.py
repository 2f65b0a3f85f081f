from __future__ import annotations

import logging

from services.logging_service import RingBufferHandler


def test_ring_buffer_keeps_recent_records() -> None:
    handler = RingBufferHandler(maxlen=3)
    log = logging.getLogger("gis.test.ring")
    log.propagate = False
    log.addHandler(handler)
    try:
        for i in range(5):
            log.warning(f"message {i}")
    finally:
        log.removeHandler(handler)

    recent = handler.get_recent()
    assert [r["message"] for r in recent] == ["message 2", "message 3", "message 4"]
    assert recent[0]["level"] == "WARNING"
    assert recent[0]["name"] == "gis.test.ring"
    assert [r["message"] for r in handler.get_recent(1)] == ["message 4"]
    assert len(handler.get_recent(0)) == 3
