"""Flag parsing, file classification and formatting helpers for the listing."""

from __future__ import annotations

import grp
import os
import pwd
import stat
import sys
import time
from dataclasses import dataclass
from typing import Iterable, Sequence, TextIO

CURRENT_DIRECTORY = "."
PARENT_DIRECTORY = ".."

# Six months of thirty days, in seconds.
RECENT_THRESHOLD = 6 * 30 * 24 * 60 * 60

_PERMISSION_BITS = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)


@dataclass
class Flags:
    """Options of a listing: -A, -l and -R."""

    almost_all: bool = False
    long_format: bool = False
    recursive: bool = False


_OPTION_FIELDS = {"A": "almost_all", "l": "long_format", "R": "recursive"}


def parse_flags(argv: Sequence[str]) -> tuple[Flags, list[str]]:
    """Split arguments into flags and operands.

    Options may appear anywhere; ``--`` ends option processing. Unknown
    option letters are ignored.
    """
    flags = Flags()
    operands: list[str] = []
    args: Iterable[str] = iter(argv)
    for arg in args:
        if arg == "--":
            operands.extend(args)
            break
        if arg.startswith("-") and len(arg) > 1:
            for letter in arg[1:]:
                field = _OPTION_FIELDS.get(letter)
                if field is not None:
                    setattr(flags, field, True)
        else:
            operands.append(arg)
    return flags, operands


def file_type_char(mode: int) -> str:
    """Return the character naming the file type encoded in ``mode``."""
    if stat.S_ISREG(mode):
        return "-"
    if stat.S_ISDIR(mode):
        return "d"
    if stat.S_ISCHR(mode):
        return "c"
    if stat.S_ISBLK(mode):
        return "b"
    if stat.S_ISFIFO(mode):
        return "p"
    if stat.S_ISLNK(mode):
        return "l"
    return "s"


def permissions_string(mode: int) -> str:
    """Return the nine-character rwx permission string of ``mode``."""
    return "".join(char if mode & bit else "-" for bit, char in _PERMISSION_BITS)


def owner_name(uid: int) -> str:
    """Return the user name for ``uid``, or the number when it is unknown."""
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def group_name(gid: int) -> str:
    """Return the group name for ``gid``, or the number when it is unknown."""
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def is_current_directory(name: str) -> bool:
    return name == CURRENT_DIRECTORY


def is_parent_directory(name: str) -> bool:
    return name == PARENT_DIRECTORY


def is_hidden_file(name: str) -> bool:
    return name.startswith(".")


def should_skip(name: str, flags: Flags) -> bool:
    """Tell whether a directory entry is left out of a listing."""
    return (
        (not flags.almost_all and is_hidden_file(name))
        or is_current_directory(name)
        or is_parent_directory(name)
    )


def join_path(directory: str, name: str) -> str:
    """Join a directory and an entry name with exactly one separating slash."""
    if directory.endswith("/"):
        return directory + name
    return f"{directory}/{name}"


def _format_time(mtime: float, now: float) -> str:
    tm = time.localtime(mtime)
    month = time.strftime("%b", tm)
    day = f"{tm.tm_mday:>2}"
    if now - mtime < RECENT_THRESHOLD:
        return f"{month} {day} {tm.tm_hour:02}:{tm.tm_min:02}"
    return f"{month} {day} {tm.tm_year}"


def format_long_entry(path: str, name: str, now: float | None = None) -> str:
    """Return the long-format line (without newline) for the file at ``path``.

    Raises OSError when the file cannot be examined.
    """
    st = os.stat(path)
    if now is None:
        now = time.time()
    return (
        f"{file_type_char(st.st_mode)}{permissions_string(st.st_mode)}"
        f" {st.st_nlink} {owner_name(st.st_uid)} {group_name(st.st_gid)}"
        f" {st.st_size} {_format_time(st.st_mtime, now)} {name}"
    )


def file_block_count(path: str) -> int:
    """Return the number of 1K blocks used by ``path``, or 0 if it is missing."""
    try:
        st = os.stat(path)
    except OSError:
        return 0
    return getattr(st, "st_blocks", 0) // 2


def _visible_entries(directory: str, flags: Flags) -> list[str]:
    return [name for name in os.listdir(directory) if not should_skip(name, flags)]


def total_block_count(directory: str, flags: Flags) -> int:
    """Sum the block counts of the listed entries of ``directory``.

    Raises OSError when the directory cannot be read.
    """
    return sum(
        file_block_count(join_path(directory, name))
        for name in _visible_entries(directory, flags)
    )


def _describe(error: BaseException) -> str:
    strerror = getattr(error, "strerror", None)
    return strerror if strerror else str(error)


def directory_error_message(directory: str, error: BaseException) -> str:
    """Return the message reported when a directory cannot be opened."""
    shown = directory if directory.endswith("/") else directory + "/"
    return f"ls: cannot open directory {shown}: {_describe(error)}"


def file_error_message(name: str, error: BaseException) -> str:
    """Return the message reported when a file cannot be accessed."""
    return f"ls: cannot access {name}: {_describe(error)}"


def has_subdirectories(
    directory: str, flags: Flags, err: TextIO | None = None
) -> bool:
    """Tell whether ``directory`` has a listed entry that is a directory.

    When the directory cannot be read, the error is written to ``err``
    (standard error by default) and False is returned.
    """
    if err is None:
        err = sys.stderr
    try:
        names = _visible_entries(directory, flags)
    except OSError as error:
        print(directory_error_message(directory, error), file=err)
        return False
    for name in names:
        try:
            st = os.stat(join_path(directory, name))
        except OSError:
            continue
        if file_type_char(st.st_mode) == "d":
            return True
    return False