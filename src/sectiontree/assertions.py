"""Expectation primitives used inside test bodies.

`check` fails with `CheckFailed` when a condition is falsy; `expect_raises`
fails with `ExpectedFaultMissing` when an operation completes without raising
the expected fault type. Both record the caller's file, line and the source
text of what was checked, recovered from the caller's source line.
"""

import ast
import inspect
import linecache
from collections.abc import Callable
from types import FrameType, TracebackType
from typing import Any

from sectiontree.exceptions import CheckFailed, ExpectedFaultMissing

FaultTypes = type[BaseException] | tuple[type[BaseException], ...]


def _caller_position(depth: int) -> tuple[str, int, str]:
    """File, line and stripped source line of the frame `depth` levels up."""
    frame: FrameType | None = inspect.currentframe()
    for _ in range(depth + 1):
        if frame is None:
            break
        frame = frame.f_back
    if frame is None:
        return "<unknown>", 0, ""
    file = frame.f_code.co_filename
    line = frame.f_lineno
    del frame
    return file, line, linecache.getline(file, line).strip()


def _call_arguments(source_line: str, func_name: str) -> list[str] | None:
    """Source text of each positional argument of the first `func_name(...)` call."""
    if source_line.startswith("with ") and source_line.endswith(":"):
        source_line = source_line[len("with ") : -1].split(" as ")[0]
    try:
        tree = ast.parse(source_line)
    except SyntaxError:
        return None

    for node in ast.walk(tree):
        if not isinstance(node, ast.Call):
            continue
        callee = node.func
        name = callee.attr if isinstance(callee, ast.Attribute) else getattr(callee, "id", None)
        if name != func_name:
            continue
        segments = [ast.get_source_segment(source_line, arg) for arg in node.args]
        return [segment for segment in segments if segment is not None]
    return None


def check(condition: Any, expression: str | None = None) -> None:
    """
    Fail the current invocation when `condition` is falsy.

    Params:
        condition: Value evaluated for truthiness
        expression: Text reported on failure; defaults to the argument's source text

    Raises:
        CheckFailed: If `condition` is falsy
    """
    if condition:
        return

    file, line, source_line = _caller_position(1)
    if expression is None:
        arguments = _call_arguments(source_line, "check")
        if arguments:
            expression = arguments[0]
        else:
            expression = source_line or repr(condition)
    raise CheckFailed(file, line, expression)


class _ExpectRaises:
    """Context manager form of `expect_raises`."""

    def __init__(self, fault_type: FaultTypes, file: str, line: int, expression: str):
        self.fault_type = fault_type
        self.file = file
        self.line = line
        self.expression = expression

    @property
    def expected(self) -> tuple[type[BaseException], ...]:
        if isinstance(self.fault_type, tuple):
            return self.fault_type
        return (self.fault_type,)

    def __enter__(self) -> "_ExpectRaises":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if exc_type is None:
            raise ExpectedFaultMissing(
                self.file, self.line, self.expression, self.expected
            )
        # Matching faults are swallowed; anything else keeps propagating
        return issubclass(exc_type, self.fault_type)


def expect_raises(
    fault_type: FaultTypes,
    func: Callable[..., Any] | None = None,
    *args: Any,
    **kwargs: Any,
) -> _ExpectRaises | None:
    """Expect an operation to raise `fault_type`.

    Called with a callable, runs it immediately. Called with only the fault
    type, returns a context manager guarding the `with` block:

        expect_raises(KeyError, mapping.__getitem__, "missing")

        with expect_raises(ZeroDivisionError):
            1 / 0

    Faults of other types propagate unchanged.

    Params:
        fault_type: Exception type (or tuple of types) that must be raised
        func: Optional operation to call
        *args: Positional arguments for `func`
        **kwargs: Keyword arguments for `func`

    Returns:
        The context manager when `func` is omitted, otherwise None

    Raises:
        ExpectedFaultMissing: If the operation completed without raising `fault_type`
    """
    file, line, source_line = _caller_position(1)
    arguments = _call_arguments(source_line, "expect_raises")
    if arguments and len(arguments) > 1:
        expression = f"{arguments[1]}({', '.join(arguments[2:])})"
    else:
        expression = source_line

    guard = _ExpectRaises(fault_type, file, line, expression)
    if func is None:
        return guard

    with guard:
        func(*args, **kwargs)
    return None
