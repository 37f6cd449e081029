"""Immutable parse settings."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

# Hook type definitions - hooks receive the literal's ASCII text
ParseFloatHook = Callable[[str], Any] | None
ParseIntHook = Callable[[str], Any] | None

DEFAULT_MAX_DEPTH = 512


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures JSON parsing behavior with immutable settings.

    ``strict`` rejects raw control characters inside strings, ``max_depth``
    bounds how many arrays and objects may be open at once, and the number
    hooks replace the default ``int``/``float`` conversion.
    """

    strict: bool = True
    max_depth: int = DEFAULT_MAX_DEPTH
    parse_int: ParseIntHook = None
    parse_float: ParseFloatHook = None

    def __post_init__(self) -> None:
        if not isinstance(self.strict, bool):
            raise TypeError("strict must be a boolean")
        if isinstance(self.max_depth, bool) or not isinstance(
            self.max_depth, int
        ):
            raise TypeError("max_depth must be an integer")
        if self.max_depth < 1:
            raise ValueError("max_depth must be a positive integer")
        for name in ("parse_int", "parse_float"):
            hook = getattr(self, name)
            if hook is not None and not callable(hook):
                raise TypeError(f"{name} must be callable")
