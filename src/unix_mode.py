"""Decode Unix file mode bits into file type and permissions, and render them
the way ``ls -l`` shows them.

    >>> to_string(0o0040755)
    'drwxr-xr-x'
    >>> to_string(0o0100640)
    '-rw-r-----'

Nothing here asks the OS to interpret the bits, so it works the same on
non-Unix platforms, e.g. for modes read out of archive headers.
"""
from enum import Enum
import logging
import operator
from typing import Dict, Final, List, SupportsIndex, Tuple

from cachetools.func import lru_cache

from mode_masks import (
    S_IFBLK, S_IFCHR, S_IFDIR, S_IFIFO, S_IFLNK, S_IFMT, S_IFREG, S_IFSOCK,
    S_IMODE_MASK, S_ISGID, S_ISUID, S_ISVTX,
    S_IRUSR, S_IWUSR, S_IXUSR,
    S_IRGRP, S_IWGRP, S_IXGRP,
    S_IROTH, S_IWOTH, S_IXOTH,
)

LOGGER: Final = logging.getLogger(__name__)

MODE_CACHE_SIZE: Final = 1024
"""How many distinct modes ``to_string`` remembers."""


class FileType(Enum):
    """The types of file known to this library, valued by their ``ls`` character."""

    FIFO = "p"
    CHAR_DEVICE = "c"
    DIR = "d"
    BLOCK_DEVICE = "b"
    FILE = "-"
    SYMLINK = "l"
    SOCKET = "s"
    UNKNOWN = "?"

    @classmethod
    def from_mode(cls, mode: SupportsIndex) -> "FileType":
        """Classify ``mode`` by its file type field.

        Unrecognised type bits give ``UNKNOWN`` rather than an error.
        """
        return _classify(_as_mode(mode))


class Accessor(Enum):
    """Who is accessing, in ``ls`` column order. Values are the ``chmod`` letters."""

    USER = "u"
    GROUP = "g"
    OTHER = "o"


class Access(Enum):
    """The kind of access, in ``ls`` column order."""

    READ = "r"
    WRITE = "w"
    EXECUTE = "x"


_TYPES_BY_BITS: Final[Dict[int, FileType]] = {
    S_IFIFO: FileType.FIFO,
    S_IFCHR: FileType.CHAR_DEVICE,
    S_IFDIR: FileType.DIR,
    S_IFBLK: FileType.BLOCK_DEVICE,
    S_IFREG: FileType.FILE,
    S_IFLNK: FileType.SYMLINK,
    S_IFSOCK: FileType.SOCKET,
}

_PERMISSION_BITS: Final[Dict[Tuple[Accessor, Access], int]] = {
    (Accessor.USER, Access.READ): S_IRUSR,
    (Accessor.USER, Access.WRITE): S_IWUSR,
    (Accessor.USER, Access.EXECUTE): S_IXUSR,
    (Accessor.GROUP, Access.READ): S_IRGRP,
    (Accessor.GROUP, Access.WRITE): S_IWGRP,
    (Accessor.GROUP, Access.EXECUTE): S_IXGRP,
    (Accessor.OTHER, Access.READ): S_IROTH,
    (Accessor.OTHER, Access.WRITE): S_IWOTH,
    (Accessor.OTHER, Access.EXECUTE): S_IXOTH,
}

# Bit that takes over each class's execute column, and its lowercase character.
_SPECIAL_BITS: Final[Dict[Accessor, Tuple[int, str]]] = {
    Accessor.USER: (S_ISUID, "s"),
    Accessor.GROUP: (S_ISGID, "s"),
    Accessor.OTHER: (S_ISVTX, "t"),
}


def _as_mode(mode: SupportsIndex) -> int:
    value = operator.index(mode)
    if value < 0:
        raise ValueError(f"mode must be non-negative, got {value}")
    return value


def _classify(mode: int) -> FileType:
    file_type = _TYPES_BY_BITS.get(mode & S_IFMT)
    if file_type is None:
        LOGGER.debug("Unrecognised file type bits in mode %#o", mode)
        return FileType.UNKNOWN
    return file_type


# Field extraction

def type_bits(mode: SupportsIndex) -> int:
    """Return just the bits representing the type of file."""
    return _as_mode(mode) & S_IFMT


def permission_bits(mode: SupportsIndex) -> int:
    """Return the permission and special bits, like ``stat.S_IMODE``."""
    return _as_mode(mode) & S_IMODE_MASK


# File type

def file_type(mode: SupportsIndex) -> FileType:
    return FileType.from_mode(mode)


def type_char(mode: SupportsIndex) -> str:
    """Return the ``ls -l`` type character: one of ``d-lcbps`` or ``?``."""
    return FileType.from_mode(mode).value


def is_file(mode: SupportsIndex) -> bool:
    """Returns true if this mode represents a regular file.

        >>> is_file(0o0041777), is_file(0o0100640)
        (False, True)
    """
    return FileType.from_mode(mode) is FileType.FILE


def is_dir(mode: SupportsIndex) -> bool:
    """Returns true if this mode represents a directory.

        >>> is_dir(0o0041777), is_dir(0o0100640)
        (True, False)
    """
    return FileType.from_mode(mode) is FileType.DIR


def is_symlink(mode: SupportsIndex) -> bool:
    """Returns true if this mode represents a symlink.

        >>> is_symlink(0o0040755), is_symlink(0o0120755)
        (False, True)
    """
    return FileType.from_mode(mode) is FileType.SYMLINK


def is_fifo(mode: SupportsIndex) -> bool:
    """Returns true if this mode represents a fifo, also known as a named pipe."""
    return FileType.from_mode(mode) is FileType.FIFO


def is_char_device(mode: SupportsIndex) -> bool:
    return FileType.from_mode(mode) is FileType.CHAR_DEVICE


def is_block_device(mode: SupportsIndex) -> bool:
    """Returns true if this mode represents a block device, such as a disk.

        >>> is_block_device(0o0020600), is_block_device(0o0060600)
        (False, True)
    """
    return FileType.from_mode(mode) is FileType.BLOCK_DEVICE


def is_socket(mode: SupportsIndex) -> bool:
    """Returns true if this mode represents a Unix-domain socket."""
    return FileType.from_mode(mode) is FileType.SOCKET


# Special bits

def is_setuid(mode: SupportsIndex) -> bool:
    """Returns true if the set-user-ID bit is set."""
    return bool(_as_mode(mode) & S_ISUID)


def is_setgid(mode: SupportsIndex) -> bool:
    """Returns true if the set-group-ID bit is set."""
    return bool(_as_mode(mode) & S_ISGID)


def is_sticky(mode: SupportsIndex) -> bool:
    """Returns true if the sticky bit is set."""
    return bool(_as_mode(mode) & S_ISVTX)


# Permissions

def is_allowed(by: Accessor, access: Access, mode: SupportsIndex) -> bool:
    """Check whether ``mode`` allows (``True``) or denies (``False``) the access.

    Only the plain permission bits are consulted; ``ls`` shows setuid, setgid
    and sticky in the execute column but they do not grant execution.
    """
    return bool(_as_mode(mode) & _PERMISSION_BITS[(by, access)])


def is_owner_readable(mode: SupportsIndex) -> bool:
    return is_allowed(Accessor.USER, Access.READ, mode)


def is_owner_writable(mode: SupportsIndex) -> bool:
    return is_allowed(Accessor.USER, Access.WRITE, mode)


def is_owner_executable(mode: SupportsIndex) -> bool:
    return is_allowed(Accessor.USER, Access.EXECUTE, mode)


def is_group_readable(mode: SupportsIndex) -> bool:
    return is_allowed(Accessor.GROUP, Access.READ, mode)


def is_group_writable(mode: SupportsIndex) -> bool:
    return is_allowed(Accessor.GROUP, Access.WRITE, mode)


def is_group_executable(mode: SupportsIndex) -> bool:
    return is_allowed(Accessor.GROUP, Access.EXECUTE, mode)


def is_other_readable(mode: SupportsIndex) -> bool:
    return is_allowed(Accessor.OTHER, Access.READ, mode)


def is_other_writable(mode: SupportsIndex) -> bool:
    return is_allowed(Accessor.OTHER, Access.WRITE, mode)


def is_other_executable(mode: SupportsIndex) -> bool:
    return is_allowed(Accessor.OTHER, Access.EXECUTE, mode)


# Rendering

def to_string(mode: SupportsIndex) -> str:
    """Convert mode bits to the 10 character type and permissions string
    shown by ``ls -l``.

        >>> to_string(0o0041777)  # classic "sticky" directory
        'drwxrwxrwt'
        >>> to_string(0o0020600), to_string(0o0060600)
        ('crw-------', 'brw-------')
        >>> to_string(0o0120777)
        'lrwxrwxrwx'
    """
    return _render(_as_mode(mode))


@lru_cache(maxsize=MODE_CACHE_SIZE)
def _render(mode: int) -> str:
    chars: List[str] = [_classify(mode).value]
    for accessor in Accessor:
        for access in (Access.READ, Access.WRITE):
            granted = mode & _PERMISSION_BITS[(accessor, access)]
            chars.append(access.value if granted else "-")
        executable = mode & _PERMISSION_BITS[(accessor, Access.EXECUTE)]
        special_bit, special_char = _SPECIAL_BITS[accessor]
        if mode & special_bit:
            chars.append(special_char if executable else special_char.upper())
        else:
            chars.append(Access.EXECUTE.value if executable else "-")
    return "".join(chars)
