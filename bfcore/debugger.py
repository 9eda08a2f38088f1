"""
Brainfuck Step-by-Step Debugger

Logs every executed instruction together with the state of the memory tape
around the data pointer. Enable the `bfcore.debugger` logger at DEBUG level
to see the trace.
"""

import logging
from typing import Optional, Tuple

from .collaborators import Input, Output
from .config import InterpreterConfig
from .errors import StepLimitExceeded
from .interpreter import Interpreter

logger = logging.getLogger(__name__)


class BrainfuckDebugger(Interpreter):
    """Interpreter that traces each step and can stop runaway programs."""

    def __init__(self, program: str, input: Input, output: Output,
                 config: Optional[InterpreterConfig] = None,
                 show_memory_range: int = 10, max_steps: Optional[int] = None):
        super().__init__(program, input, output, config)
        self.show_memory_range = show_memory_range
        self.max_steps = max_steps

    def _trace_step(self, code: int):
        if self.max_steps is not None and self.steps >= self.max_steps:
            raise StepLimitExceeded(
                f"Execution stopped after {self.max_steps} steps (possible infinite loop)",
                self.instruction_ptr,
            )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Step %d: execute %r at position %d",
                         self.steps + 1, chr(code), self.instruction_ptr)
            logger.debug("%s", self.format_state())

    def memory_window(self) -> Tuple[int, int]:
        """Range of cell addresses shown, focused around the data pointer."""
        start = max(0, self.data_ptr - self.show_memory_range // 2)
        end = min(self.tape_size, start + self.show_memory_range)

        # Adjust start if we're near the end
        if end - start < self.show_memory_range:
            start = max(0, end - self.show_memory_range)
        return start, end

    def format_state(self) -> str:
        start, end = self.memory_window()

        memory_vals = []
        memory_ptrs = []
        memory_addrs = []
        for i in range(start, end):
            memory_vals.append(f"{int(self.data_tape[i]):3d}")
            memory_ptrs.append(" ^ " if i == self.data_ptr else "   ")
            memory_addrs.append(f"{i:3d}")

        return "\n".join([
            "Memory:   [" + "|".join(memory_vals) + "]",
            "Pointer:   " + " ".join(memory_ptrs),
            "Address:   " + " ".join(memory_addrs),
            f"Loops:    depth {self.nested_loop_counter}",
        ])
