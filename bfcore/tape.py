"""Program tape loading.

The program tape has a fixed number of slots and is filled with the code
points of the source text; every slot past the text holds 0, which the
interpreter reads as end of program.
"""

import logging
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)

SENTINEL = 0

# Code points of the eight instructions
INC = ord('+')
DEC = ord('-')
RIGHT = ord('>')
LEFT = ord('<')
OUT = ord('.')
IN = ord(',')
LOOP_OPEN = ord('[')
LOOP_CLOSE = ord(']')


@dataclass(frozen=True)
class ProgramTape:
    cells: np.ndarray
    length: int
    truncated: int = 0

    @property
    def capacity(self) -> int:
        return len(self.cells)

    def __getitem__(self, index: int) -> int:
        return int(self.cells[index])

    def source(self) -> str:
        """The loaded instructions as text (up to the first sentinel)."""
        codes = self.cells[:self.length]
        end = np.flatnonzero(codes == SENTINEL)
        if end.size:
            codes = codes[:end[0]]
        return ''.join(chr(c) for c in codes)


def load_program(text: str, capacity: int) -> ProgramTape:
    """Create a program tape of exactly `capacity` slots from `text`.

    Characters beyond the capacity are dropped, not rejected.
    """
    cells = np.zeros(capacity, dtype=np.uint32)
    kept = text[:capacity]
    if kept:
        cells[:len(kept)] = [ord(c) for c in kept]

    truncated = len(text) - len(kept)
    if truncated:
        logger.warning(
            "Program is %d characters long, tape holds %d; dropped %d trailing characters",
            len(text), capacity, truncated,
        )

    cells.setflags(write=False)
    return ProgramTape(cells=cells, length=len(kept), truncated=truncated)
