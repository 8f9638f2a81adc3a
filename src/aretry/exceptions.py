r"""Exceptions raised by the retry driver."""

from __future__ import annotations

__all__ = ["ExhaustionError"]


class ExhaustionError(TimeoutError):
    """Raised when the delay sequence has no delay left for a new
    attempt.

    The error carries no attempt count or history. Callers that need
    diagnostics should record them in the action factory.

    It subclasses the builtin ``TimeoutError`` so it can be handled
    together with other timeout errors.

    Example:
        ```pycon
        >>> from aretry.exceptions import ExhaustionError
        >>> str(ExhaustionError())
        'chances have been run out'
        >>> isinstance(ExhaustionError(), TimeoutError)
        True
        >>> ExhaustionError() == ExhaustionError()
        True

        ```
    """

    def __init__(self) -> None:
        super().__init__("chances have been run out")

    def __reduce__(self) -> tuple[type[ExhaustionError], tuple[()]]:
        return (type(self), ())

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ExhaustionError)

    def __hash__(self) -> int:
        return hash(ExhaustionError)

    def __repr__(self) -> str:
        return "ExhaustionError()"
