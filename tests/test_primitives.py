"""Tests for the debouncer and the signal/sentinel primitives."""

from __future__ import annotations

import asyncio
import logging

import pytest

from gif_explorer.client.debounce import Debouncer
from gif_explorer.client.signals import ScrollSentinel, Signal


@pytest.mark.asyncio
async def test_debouncer_fires_last_value_once():
    fired = []
    debouncer = Debouncer(0.01, fired.append)

    debouncer.schedule("a")
    debouncer.schedule("b")
    assert debouncer.pending
    await asyncio.sleep(0.05)

    assert fired == ["b"]
    assert not debouncer.pending


@pytest.mark.asyncio
async def test_debouncer_cancel_drops_pending_call():
    fired = []
    debouncer = Debouncer(0.01, fired.append)

    debouncer.schedule("a")
    debouncer.cancel()
    await asyncio.sleep(0.05)

    assert fired == []


@pytest.mark.asyncio
async def test_debouncer_restarts_window():
    fired = []
    debouncer = Debouncer(0.05, fired.append)

    debouncer.schedule("a")
    await asyncio.sleep(0.03)
    debouncer.schedule("ab")
    await asyncio.sleep(0.03)
    assert fired == []

    await asyncio.sleep(0.05)
    assert fired == ["ab"]


def test_signal_connect_is_idempotent_and_disconnect_works():
    received = []
    signal = Signal("test")
    signal.connect(received.append)
    signal.connect(received.append)

    signal.emit(1)
    signal.disconnect(received.append)
    signal.emit(2)

    assert received == [1]


def test_failing_subscriber_does_not_block_others(caplog):
    received = []

    def broken(value):
        raise RuntimeError("boom")

    sentinel = ScrollSentinel()
    sentinel.connect(broken)
    sentinel.connect(received.append)

    with caplog.at_level(logging.ERROR):
        sentinel.notify()

    assert received == [True]
    assert "scroll_sentinel" in caplog.text
