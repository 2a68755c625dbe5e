# tests/core/test_trace.py
"""
chip8_tracer.core.traceモジュールの単体テスト。
"""
import pytest

from chip8_tracer.core.trace import DebugTrace, TRACE_CAPACITY

# @intent:test_suite 上限付きFIFOトレースの検証。

def test_disabled_trace_ignores_appends():
    trace = DebugTrace()
    trace.append("ignored")
    assert len(trace) == 0

def test_append_keeps_order():
    trace = DebugTrace(enabled=True)
    trace.append("a")
    trace.append("b")
    assert trace.entries() == ["a", "b"]

# @intent:test_case_fifo_eviction 上限を超えた場合に最も古い行から捨てられることを検証します。
def test_capacity_is_51_and_oldest_is_evicted():
    trace = DebugTrace(enabled=True)
    assert trace.capacity == TRACE_CAPACITY == 51
    for n in range(100):
        trace.append(str(n))
        assert len(trace) <= TRACE_CAPACITY
    assert len(trace) == 51
    assert trace.entries()[0] == "49"
    assert trace.entries()[-1] == "99"

def test_clear():
    trace = DebugTrace(enabled=True)
    trace.append("x")
    trace.clear()
    assert list(trace) == []

def test_invalid_capacity():
    with pytest.raises(ValueError):
        DebugTrace(capacity=0)
