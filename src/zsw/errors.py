"""
Error kinds raised while mutating train files.

Failures are chained with native exception chaining: each step wraps the
error it could not handle in a StepError naming what it was attempting, so
the root cause stays reachable through ``__cause__``.
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple


class ZswError(Exception):
    """Base class for every error raised by zsw."""


class ParseError(ZswError):
    """Malformed document, time string or numeric attribute."""


class MissingTag(ZswError):
    def __init__(self, tag: str):
        super().__init__(f"no tag '{tag}'")
        self.tag = tag


class MissingAttribute(ZswError):
    def __init__(self, tag: str, attribute: str):
        super().__init__(f"no attribute '{attribute}' on '{tag}'")
        self.tag = tag
        self.attribute = attribute


class MissingChild(ZswError):
    def __init__(self, tag: str, child: str):
        super().__init__(f"no child '{child}' inside '{tag}'")
        self.tag = tag
        self.child = child


class MissingEntry(ZswError):
    def __init__(self):
        super().__init__("no 'FahrplanEintrag' entry inside 'Zug'")


class UnrecognizedVariant(ZswError):
    """An element outside the consist vocabulary was found."""

    def __init__(self, name: str):
        super().__init__(f"unrecognized consist element '{name}'")
        self.name = name


class InvalidDistributionParameters(ZswError):
    pass


class DateOverflowError(ZswError, OverflowError):
    pass


class BackupError(ZswError):
    pass


class StepError(ZswError):
    """Context wrapper: ``operation`` is what was being attempted."""

    def __init__(self, operation: str):
        super().__init__(operation)
        self.operation = operation


@contextmanager
def context(operation: str) -> Iterator[None]:
    """Re-raise any ZswError as ``StepError(operation)`` chained to it."""
    try:
        yield
    except ZswError as exc:
        raise StepError(operation) from exc


def error_chain(exc: BaseException) -> List[Tuple[Optional[str], BaseException]]:
    """
    Flatten an exception chain into (operation, exception) pairs.

    The root cause comes first with operation None, followed by the
    StepError wrappers from innermost to outermost.
    """
    chain = []
    current: Optional[BaseException] = exc
    while current is not None:
        operation = current.operation if isinstance(current, StepError) else None
        chain.append((operation, current))
        current = current.__cause__
    chain.reverse()
    return chain


def root_cause(exc: BaseException) -> BaseException:
    return error_chain(exc)[0][1]


def format_chain(exc: BaseException) -> str:
    parts = []
    for operation, err in error_chain(exc):
        if operation is None:
            parts.append(f"{type(err).__name__}: {err}")
        else:
            parts.append(operation)
    return " <- ".join(parts)
