"""
Errors raised while translating a YAML event stream, and the reporter that
turns PyYAML failures into diagnostics.
"""

from yaml.error import MarkedYAMLError
from yaml.parser import ParserError
from yaml.reader import ReaderError
from yaml.scanner import ScannerError


def format_mark(mark) -> str:
    return f"line {mark.line + 1}, column {mark.column + 1}"


def format_expected(expected) -> str:
    names = list(expected)
    if not names:
        return "nothing"
    if len(names) == 1:
        return names[0]
    return ", ".join(names[:-1]) + " or " + names[-1]


class TranslationError(Exception):
    """
    Base exception class for the package
    """


class SourceError(TranslationError):
    """The event source (PyYAML) failed to produce the next event."""

    def __init__(self, cause: BaseException) -> None:
        self._cause = cause
        super().__init__(report_source_error(cause))

    @property
    def cause(self) -> BaseException:
        return self._cause


class GrammarError(TranslationError):
    """An event of a type the event grammar forbids at this point."""

    def __init__(self, event: str, expected, mark=None, unsupported: bool = False, msg: str = None) -> None:
        self._event = event
        self._expected = tuple(expected)
        self._mark = mark
        if msg is None:
            if unsupported:
                msg = f"Event error: {event} is not supported. Expected {format_expected(self._expected)}."
            else:
                msg = f"Event error: {event}. Expected {format_expected(self._expected)}."
        super().__init__(msg)

    def __str__(self) -> str:
        result = ""
        if self._mark is not None:
            result += f"Line: {self._mark.line + 1}, col: {self._mark.column + 1}. "
        result += super().__str__()
        return result

    @property
    def event(self) -> str:
        return self._event

    @property
    def expected(self) -> tuple:
        return self._expected

    @property
    def mark(self):
        return self._mark


class NestingError(GrammarError):
    def __init__(self, event: str, max_depth: int, mark=None) -> None:
        msg = f"Event error: {event} exceeds the maximum nesting depth of {max_depth}."
        super().__init__(event, (), mark, msg=msg)
        self._max_depth = max_depth

    @property
    def max_depth(self) -> int:
        return self._max_depth


class UsageError(TranslationError):
    """A key or scalar that has to be non-empty is empty."""


def _report_marked(kind: str, exc: MarkedYAMLError) -> str:
    problem = exc.problem or "unknown problem"
    if exc.problem_mark is not None:
        problem += f" at {format_mark(exc.problem_mark)}"
    if exc.context:
        context = exc.context
        if exc.context_mark is not None:
            context += f" at {format_mark(exc.context_mark)}"
        return f"{kind} error: {context}\n{problem}"
    return f"{kind} error: {problem}"


def report_source_error(exc: BaseException) -> str:
    """
    Format a failure of the event source as a human-readable diagnostic.

    Memory, reader, scanner and parser failures each get their own layout;
    positions are reported 1-based.
    """
    if isinstance(exc, MemoryError):
        return "Memory error: Not enough memory for parsing"
    if isinstance(exc, ReaderError):
        character = exc.character
        if isinstance(character, str):
            character = ord(character)
        if character is not None:
            return f"Reader error: {exc.reason}: #{character:X} at {exc.position}"
        return f"Reader error: {exc.reason} at {exc.position}"
    if isinstance(exc, ScannerError):
        return _report_marked("Scanner", exc)
    if isinstance(exc, (ParserError, MarkedYAMLError)):
        return _report_marked("Parser", exc)
    return f"Internal error: {exc}"
