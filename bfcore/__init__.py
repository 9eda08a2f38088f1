"""A small Brainfuck interpreter over fixed-size tapes."""

from .collaborators import (
    Input,
    LineBufferedInput,
    Output,
    RecordingOutput,
    StreamOutput,
    StringInput,
)
from .config import InterpreterConfig, load_config
from .debugger import BrainfuckDebugger
from .errors import (
    BrainfuckError,
    ConfigError,
    InstructionPointerOverrunError,
    LoopStackOverflowError,
    LoopStackUnderflowError,
    StepLimitExceeded,
    UnterminatedLoopError,
)
from .interpreter import Interpreter
from .tape import ProgramTape, load_program

__version__ = "0.1.0"
