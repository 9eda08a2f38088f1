import logging

import pytest

from bfcore import (
    BrainfuckDebugger,
    Interpreter,
    InterpreterConfig,
    RecordingOutput,
    StepLimitExceeded,
    StringInput,
)


def make(program, config=None, **kwargs):
    out = RecordingOutput()
    dbg = BrainfuckDebugger(program, StringInput(""), out, config or InterpreterConfig(tape_size=64), **kwargs)
    return dbg, out


def test_trace_is_logged(caplog):
    dbg, out = make("+.")
    with caplog.at_level(logging.DEBUG, logger="bfcore.debugger"):
        dbg.run()
    assert "Step 1: execute '+' at position 0" in caplog.text
    assert "Step 2: execute '.' at position 1" in caplog.text
    assert "Memory:" in caplog.text
    assert out.values == [1]


def test_tracing_does_not_change_results():
    program = "++[>+++[>++<-]<-]>>."
    dbg, dbg_out = make(program)
    dbg.run()
    out = RecordingOutput()
    Interpreter(program, StringInput(""), out, InterpreterConfig(tape_size=64)).run()
    assert dbg_out.values == out.values == [12]
    assert dbg.steps > 0


def test_step_limit_stops_infinite_loop():
    dbg, _ = make("+[]", max_steps=50)
    with pytest.raises(StepLimitExceeded):
        dbg.run()
    assert dbg.steps == 50


def test_step_limit_not_hit():
    dbg, _ = make("+++", max_steps=3)
    dbg.run()
    assert dbg.current_cell == 3


def test_memory_window_follows_pointer():
    dbg, _ = make("", config=InterpreterConfig(tape_size=16), show_memory_range=6)
    assert dbg.memory_window() == (0, 6)
    dbg.data_ptr = 8
    assert dbg.memory_window() == (5, 11)
    dbg.data_ptr = 15
    assert dbg.memory_window() == (10, 16)


def test_format_state_marks_pointer():
    dbg, _ = make(">++", config=InterpreterConfig(tape_size=8), show_memory_range=4)
    dbg.run()
    lines = dbg.format_state().splitlines()
    assert lines[0] == "Memory:   [  0|  2|  0|  0]"
    assert lines[1] == "Pointer:   " + " ".join(["   ", " ^ ", "   ", "   "])
    assert lines[3] == "Loops:    depth 0"
