import os

import pytest

from bfcore import Input, Interpreter, InterpreterConfig, RecordingOutput, StringInput


class CountingInput(Input):
    """Hands out characters of `text` and counts how often it was asked."""

    def __init__(self, text=""):
        self.text = text
        self.calls = 0

    def input(self):
        self.calls += 1
        if not self.text:
            return '\0'
        ch, self.text = self.text[0], self.text[1:]
        return ch


@pytest.fixture
def examples_dir():
    return os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "examples")


@pytest.fixture
def counting_input():
    return CountingInput


@pytest.fixture
def small_config():
    return InterpreterConfig(tape_size=16, nested_loop_limit=4)


@pytest.fixture
def output():
    return RecordingOutput()


@pytest.fixture
def run():
    """Run `program` once and return (interpreter, recorded output)."""
    def _run(program, input_text="", config=None):
        out = RecordingOutput()
        itp = Interpreter(program, StringInput(input_text), out, config or InterpreterConfig())
        itp.run()
        return itp, out
    return _run
