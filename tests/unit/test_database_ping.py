"""Unit tests for the health check's database probe."""

import asyncio

import pytest

from newsroom.infrastructure.database import session as db_session


class _HangingConnection:
    async def __aenter__(self):
        await asyncio.sleep(5)

    async def __aexit__(self, *exc_info):
        return False


class _HangingEngine:
    def connect(self):
        return _HangingConnection()


@pytest.mark.asyncio
async def test_ping_gives_up_after_timeout(monkeypatch):
    monkeypatch.setattr(db_session, "engine", _HangingEngine())

    assert await asyncio.wait_for(db_session.ping_database(timeout=0.01), timeout=1) is False
