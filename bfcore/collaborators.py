"""Input and output objects the interpreter talks to.

The interpreter calls `Input.input()` once per ',' and `Output.output(ch)`
once per '.'. Both are owned by the caller: running a program again does
not reset whatever state they keep.
"""

import sys
from typing import List, Optional, TextIO


class Input:
    """Source of input characters. The default is permanently exhausted."""

    def input(self) -> str:
        return '\0'


class Output:
    """Sink for output characters. The default discards everything."""

    def output(self, ch: str) -> None:
        pass


class LineBufferedInput(Input):
    """Reads a line from `stream` whenever its buffer runs dry.

    Blocks on interactive streams. Returns '\\0' at end of stream.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdin
        self.buffer = ''

    def input(self) -> str:
        # Only read another line once the buffered one is used up
        if not self.buffer:
            self.buffer = self.stream.readline()
        if not self.buffer:
            return '\0'
        ch, self.buffer = self.buffer[0], self.buffer[1:]
        return ch


class StringInput(Input):
    def __init__(self, text: str):
        self.text = text
        self.index = 0

    @property
    def remaining(self) -> str:
        return self.text[self.index:]

    def input(self) -> str:
        if self.index >= len(self.text):
            return '\0'
        ch = self.text[self.index]
        self.index += 1
        return ch


class StreamOutput(Output):
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def output(self, ch: str) -> None:
        self.stream.write(ch)
        self.stream.flush()


class RecordingOutput(Output):
    """Keeps every character it is given."""

    def __init__(self):
        self.chars: List[str] = []

    def output(self, ch: str) -> None:
        self.chars.append(ch)

    @property
    def text(self) -> str:
        return ''.join(self.chars)

    @property
    def values(self) -> List[int]:
        return [ord(c) for c in self.chars]
