"""
Brainfuck Interpreter

Brainfuck is an esoteric programming language with only 8 commands:
    >   Move the pointer to the right
    <   Move the pointer to the left
    +   Increment the memory cell at the pointer
    -   Decrement the memory cell at the pointer
    .   Output the character signified by the cell at the pointer
    ,   Input a character and store it in the cell at the pointer
    [   Jump past the matching ] if the cell at the pointer is 0
    ]   Jump back to the matching [ if the cell at the pointer is nonzero

All other characters are treated as comments and ignored.

Both tapes have a fixed size. The data pointer wraps around at either end,
cells wrap around at 0 and at their maximum value, and loops are tracked on
a bounded stack instead of through recursion.
"""

import logging
from typing import Dict, Optional

import numpy as np

from .collaborators import Input, Output
from .config import InterpreterConfig
from .errors import (
    InstructionPointerOverrunError,
    LoopStackOverflowError,
    LoopStackUnderflowError,
    UnterminatedLoopError,
)
from .tape import (
    DEC, IN, INC, LEFT, LOOP_CLOSE, LOOP_OPEN, OUT, RIGHT, SENTINEL,
    ProgramTape, load_program,
)

logger = logging.getLogger(__name__)


class Interpreter:
    def __init__(self, program: str, input: Input, output: Output,
                 config: Optional[InterpreterConfig] = None):
        self.config = config if config is not None else InterpreterConfig.from_env()
        self.input = input
        self.output = output

        self.tape_size = self.config.tape_size
        self.max_cell = self.config.max_cell
        self.program: ProgramTape = load_program(program, self.tape_size)

        self.data_ptr = 0
        self.data_tape = np.zeros(self.tape_size, dtype=self.config.cell_dtype)
        self.instruction_ptr = 0

        self.nested_loop_counter = 0
        self.nested_loop_stack = np.zeros(self.config.nested_loop_limit, dtype=np.int64)

        # '[' position -> matching ']' position, filled in as loops get skipped
        self._loop_ends: Dict[int, int] = {}
        self.steps = 0

    @property
    def current_cell(self) -> int:
        return int(self.data_tape[self.data_ptr])

    @property
    def loop_depth(self) -> int:
        return self.nested_loop_counter

    def reset(self):
        """Reset pointers, loop stack and data tape. Input/output objects are untouched."""
        self.data_ptr = 0
        self.data_tape.fill(0)
        self.instruction_ptr = 0

        self.nested_loop_counter = 0
        self.nested_loop_stack.fill(0)
        self.steps = 0

    def run(self):
        """Execute the program.

        Can be called over and over again; the interpreter is reset each time.
        State kept inside the input and output objects is NOT reset, so e.g.
        input consumed by one run is gone for the next.
        """
        self.reset()
        logger.debug("Running %d instructions", self.program.length)

        cells = self.program.cells
        while True:
            code = int(cells[self.instruction_ptr])
            if code == SENTINEL:
                break

            self._trace_step(code)
            self.steps += 1

            if code == INC:
                self.increment()
            elif code == DEC:
                self.decrement()
            elif code == RIGHT:
                self.right()
            elif code == LEFT:
                self.left()
            elif code == OUT:
                self.write()
            elif code == IN:
                self.read()
            elif code == LOOP_OPEN:
                self.enter_loop()
            elif code == LOOP_CLOSE:
                self.exit_loop()

            self.instruction_ptr += 1
            if self.instruction_ptr >= self.tape_size:
                raise InstructionPointerOverrunError(
                    "Instruction pointer ran past the end of the program tape",
                    self.instruction_ptr,
                )

        if self.nested_loop_counter:
            raise UnterminatedLoopError(
                "Program ended inside a loop",
                int(self.nested_loop_stack[self.nested_loop_counter - 1]),
            )
        logger.debug("Halted after %d steps", self.steps)

    def _trace_step(self, code: int):
        """Called before every executed instruction."""

    def increment(self):
        self.data_tape[self.data_ptr] = (int(self.data_tape[self.data_ptr]) + 1) & self.max_cell

    def decrement(self):
        self.data_tape[self.data_ptr] = (int(self.data_tape[self.data_ptr]) - 1) & self.max_cell

    def right(self):
        self.data_ptr = (self.data_ptr + 1) % self.tape_size

    def left(self):
        self.data_ptr = (self.data_ptr - 1) % self.tape_size

    def write(self):
        # Only the low byte is emitted, whatever the cell width
        self.output.output(chr(int(self.data_tape[self.data_ptr]) & 0xFF))

    def read(self):
        ch = self.input.input()
        self.data_tape[self.data_ptr] = (ord(ch) if ch else 0) & self.max_cell

    def enter_loop(self):
        """Enter the loop if the current cell is nonzero, otherwise skip to its ']'.

        Entering pushes the position of this '[' onto the loop stack.
        """
        if self.data_tape[self.data_ptr] != 0:
            if self.nested_loop_counter >= len(self.nested_loop_stack):
                raise LoopStackOverflowError(
                    f"Loops nested deeper than {len(self.nested_loop_stack)}",
                    self.instruction_ptr,
                )
            self.nested_loop_stack[self.nested_loop_counter] = self.instruction_ptr
            self.nested_loop_counter += 1
        else:
            # Land on the matching ']'; the step advance moves past it
            self.instruction_ptr = self._find_loop_end(self.instruction_ptr)

    def _find_loop_end(self, start: int) -> int:
        end = self._loop_ends.get(start)
        if end is not None:
            return end

        depth = 1
        codes = self.program.cells[start + 1:self.program.length].tolist()
        for offset, code in enumerate(codes):
            if code == LOOP_OPEN:
                depth += 1
            elif code == LOOP_CLOSE:
                depth -= 1
                if depth == 0:
                    end = start + 1 + offset
                    self._loop_ends[start] = end
                    return end
        raise UnterminatedLoopError("No matching ']' for '['", start)

    def exit_loop(self):
        """Jump back to the innermost open loop if the current cell is nonzero,
        otherwise pop it off the loop stack and carry on.
        """
        if self.nested_loop_counter == 0:
            raise LoopStackUnderflowError("Unmatched ']'", self.instruction_ptr)

        if self.data_tape[self.data_ptr] != 0:
            # Resume at the first instruction of the body; the '[' is not re-run
            self.instruction_ptr = int(self.nested_loop_stack[self.nested_loop_counter - 1])
        else:
            self.nested_loop_counter -= 1
            self.nested_loop_stack[self.nested_loop_counter] = 0
