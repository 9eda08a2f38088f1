import argparse
import logging
import sys
from typing import List, Optional

from .collaborators import LineBufferedInput, StreamOutput, StringInput
from .config import InterpreterConfig, load_config
from .debugger import BrainfuckDebugger
from .errors import BrainfuckError
from .interpreter import Interpreter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="bfcore", description="Run a Brainfuck program")
    ap.add_argument("file", nargs="?", help="Path to a Brainfuck source file")
    ap.add_argument("-e", "--execute", metavar="CODE",
                    help="Program text to run instead of a file (write -e=CODE or --execute=CODE when CODE starts with '-')")
    ap.add_argument("--config", help="YAML file with interpreter settings")
    ap.add_argument("--tape-size", type=int, default=None, help="Slots in the program and data tapes")
    ap.add_argument("--loop-limit", type=int, default=None, help="Maximum loop nesting depth")
    ap.add_argument("--cell-bits", type=int, choices=[8, 16, 32], default=None, help="Width of a data cell")
    ap.add_argument("--input", default=None, help="Feed this text as input instead of reading stdin")
    ap.add_argument("--trace", action="store_true", help="Log every step (implies --log-level DEBUG)")
    ap.add_argument("--max-steps", type=int, default=None, help="Stop a traced run after this many steps")
    ap.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...)")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if (args.file is None) == (args.execute is None):
        parser.error("give either a program file or --execute CODE")

    level = "DEBUG" if args.trace else args.log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)5s %(name)s: %(message)s", stream=sys.stderr)

    try:
        config = load_config(args.config) if args.config else InterpreterConfig.from_env()
        config = config.with_overrides(
            tape_size=args.tape_size,
            nested_loop_limit=args.loop_limit,
            cell_bits=args.cell_bits,
        )
        logger.debug("Using %s", config)

        if args.execute is not None:
            program = args.execute
        else:
            with open(args.file, "r") as f:
                program = f.read()

        source = StringInput(args.input) if args.input is not None else LineBufferedInput(sys.stdin)
        sink = StreamOutput(sys.stdout)

        if args.trace or args.max_steps is not None:
            interpreter = BrainfuckDebugger(program, source, sink, config, max_steps=args.max_steps)
        else:
            interpreter = Interpreter(program, source, sink, config)
        interpreter.run()
    except (BrainfuckError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0
