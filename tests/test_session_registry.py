import asyncio
import time

import pytest

from assessment.interview.session import InterviewSession
from assessment.session.registry import SessionRegistry


def test_session_registry_register_touch_finish():
    registry = SessionRegistry()
    session = InterviewSession(session_id="s1")

    registry.register(session)
    entry = registry.get("s1")
    assert entry is not None
    assert entry.finished is False
    assert registry.get_session("s1") is session

    before_touch = entry.updated_at
    time.sleep(0.01)
    registry.touch("s1")
    assert registry.get("s1").updated_at >= before_touch

    registry.mark_finished("s1")
    assert registry.get("s1").finished is True


def test_cleanup_evicts_abandoned_in_progress_session(candidate):
    registry = SessionRegistry()
    session = InterviewSession(session_id="abandoned")
    session.start(candidate)
    registry.register(session)

    ten_days_later = time.time() + 10 * 24 * 3600
    assert registry.cleanup_stale(ttl_sec=1800, now_ts=ten_days_later) == 1
    assert registry.get_session("abandoned") is None
    assert len(registry) == 0


def test_cleanup_evicts_finished_session_after_ttl():
    registry = SessionRegistry()
    registry.register(InterviewSession(session_id="done"))
    registry.mark_finished("done")

    assert registry.cleanup_stale(ttl_sec=1800, now_ts=time.time() + 1801) == 1
    assert registry.get("done") is None


def test_cleanup_keeps_recently_touched_sessions():
    registry = SessionRegistry()
    registry.register(InterviewSession(session_id="live"))
    registry.touch("live")

    assert registry.cleanup_stale(ttl_sec=1800, now_ts=time.time() + 60) == 0
    assert len(registry) == 1


@pytest.mark.asyncio
async def test_cleanup_never_evicts_session_while_evaluating(candidate):
    registry = SessionRegistry()
    session = InterviewSession(session_id="busy", evaluation_delay_sec=0.05)
    session.start(candidate)
    registry.register(session)

    task = asyncio.create_task(session.submit("workbook tabs."))
    await asyncio.sleep(0)
    assert session.is_evaluating

    assert registry.cleanup_stale(ttl_sec=1800, now_ts=time.time() + 3600) == 0
    await task
    assert registry.cleanup_stale(ttl_sec=1800, now_ts=time.time() + 3600) == 1
