import pytest

from bfcore import (
    BrainfuckError,
    InstructionPointerOverrunError,
    Interpreter,
    InterpreterConfig,
    LoopStackOverflowError,
    LoopStackUnderflowError,
    RecordingOutput,
    StringInput,
    UnterminatedLoopError,
)


def make(program, **config):
    return Interpreter(program, StringInput(""), RecordingOutput(), InterpreterConfig(**config))


def test_skipped_unmatched_open_bracket():
    with pytest.raises(UnterminatedLoopError) as exc:
        make("[+").run()
    assert exc.value.position == 0
    assert "position 0" in str(exc.value)


def test_entered_unmatched_open_bracket():
    with pytest.raises(UnterminatedLoopError) as exc:
        make("+>+[-<").run()
    assert exc.value.position == 3


def test_unmatched_open_bracket_in_nested_skip():
    with pytest.raises(UnterminatedLoopError):
        make("[[]").run()


@pytest.mark.parametrize("program", ["]", "+]", "+[-]]"])
def test_unmatched_close_bracket(program):
    with pytest.raises(LoopStackUnderflowError) as exc:
        make(program).run()
    assert exc.value.position == len(program) - 1


def test_loop_nesting_limit():
    with pytest.raises(LoopStackOverflowError) as exc:
        make("+[[[-]]]", tape_size=16, nested_loop_limit=2).run()
    assert exc.value.position == 3


def test_nesting_at_limit_is_fine():
    itp = make("+[[-]]", tape_size=16, nested_loop_limit=2)
    itp.run()
    assert itp.current_cell == 0


def test_program_filling_whole_tape_overruns():
    itp = make("++++", tape_size=4)
    with pytest.raises(InstructionPointerOverrunError) as exc:
        itp.run()
    assert exc.value.position == 4
    assert itp.current_cell == 4


def test_truncated_program_overruns(caplog):
    itp = make("+++++.", tape_size=4)
    assert itp.program.truncated == 2
    with pytest.raises(InstructionPointerOverrunError):
        itp.run()


def test_errors_share_a_base_class():
    for cls in (UnterminatedLoopError, LoopStackOverflowError,
                LoopStackUnderflowError, InstructionPointerOverrunError):
        assert issubclass(cls, BrainfuckError)


def test_error_run_can_be_repeated():
    itp = make("+[", tape_size=8)
    for _ in range(2):
        with pytest.raises(UnterminatedLoopError):
            itp.run()
        assert itp.loop_depth == 1
