# tests/unit/test_context.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import threading

import pytest

from snapstate import CommandCancelledError, CommandContext


def test_new_context_is_not_cancelled():
    ctx = CommandContext()
    assert not ctx.cancelled
    ctx.raise_if_cancelled()


def test_cancel_sets_flag():
    ctx = CommandContext()
    ctx.cancel()
    assert ctx.cancelled
    with pytest.raises(CommandCancelledError):
        ctx.raise_if_cancelled()


def test_values_are_copied():
    source = {"user": "aria"}
    ctx = CommandContext(source)
    ctx.values["user"] = "other"
    assert source == {"user": "aria"}


def test_wait_times_out_when_not_cancelled():
    assert CommandContext().wait(timeout=0.01) is False


def test_wait_returns_when_cancelled_from_another_thread():
    ctx = CommandContext()
    timer = threading.Timer(0.01, ctx.cancel)
    timer.start()
    try:
        assert ctx.wait(timeout=5.0) is True
    finally:
        timer.cancel()
