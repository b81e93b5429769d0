"""Defines helper class ``ModeAttr`` to use instead of a regular
``dict`` when presenting ``stat``-like structures, e.g. those read out of
archive metadata, with their mode decoded.
"""
from datetime import datetime
from typing import Callable, Dict, Final, Generator, List, Tuple, Union

from unix_mode import FileType, file_type, to_string


class ModeAttr(Dict[str, Union[int, float]]):
    """Adds custom __str__ to format time stamps and the mode in a `stat` structure."""

    @property
    def file_type(self) -> FileType:
        return file_type(int(self["st_mode"]))

    @property
    def permissions_string(self) -> str:
        """The ``ls -l`` rendering of ``st_mode``."""
        return to_string(int(self["st_mode"]))

    def items_formatted(self) -> Generator[Tuple[str, str], None, None]:
        """Returns key/value pairs, but with the value formatted for human
        consumption.
        """
        for key, value in self.items():
            formatter = _FORMATTERS.get(key, str)
            str_value = formatter(value) # type: ignore[arg-type]
            yield (key, str_value)

    def __str__(self) -> str:
        """`str()` function for `ModeAttr`s.

        Returns:
            A YAML-like string using "key: value", one line per key.
            If you want more control over formatting, call
            ``items_formatted()`` and iterate directly.
        """
        lines: List[str] = []
        for key, value in self.items_formatted():
            lines.append(f"{key}: {value}")
        return "\n".join(lines)

    __repr__ = __str__

    def copy(self) -> "ModeAttr":
        return ModeAttr(self.items())


# Static helpers

_TIME_FMT = Callable[[float], str]
_MODE_FMT = Callable[[int], str]
_FMT_T = Union[_TIME_FMT, _MODE_FMT]

def _format_time(timet: float) -> str:
    return datetime.fromtimestamp(timet).isoformat()

def _format_mode(mode: int) -> str:
    mode = int(mode)
    return f"{to_string(mode)} ({oct(mode)})"

_FORMATTERS: Final[Dict[str, _FMT_T]] = {
    "st_ctime": _format_time,
    "st_mtime": _format_time,
    "st_atime": _format_time,
    "st_birthtime": _format_time,
    "st_mode": _format_mode,
}
