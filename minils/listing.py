"""Listing of files and directories with the -A, -l and -R options."""

from __future__ import annotations

import os
import sys
from typing import Sequence, TextIO

from minils.helpers import (
    CURRENT_DIRECTORY,
    Flags,
    directory_error_message,
    file_error_message,
    file_type_char,
    format_long_entry,
    has_subdirectories,
    join_path,
    parse_flags,
    should_skip,
    total_block_count,
)


def _is_directory(path: str) -> bool:
    try:
        return file_type_char(os.stat(path).st_mode) == "d"
    except OSError:
        return False


class Lister:
    """Writes listings of paths according to a set of flags."""

    def __init__(
        self,
        flags: Flags,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.flags = flags
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr

    def process_file(self, path: str, name: str) -> None:
        """List one file, or report that it cannot be accessed."""
        try:
            os.stat(path)
        except OSError as error:
            print(file_error_message(name, error), file=self.err)
            return
        if should_skip(name, self.flags):
            return
        if self.flags.long_format:
            try:
                line = format_long_entry(path, name)
            except OSError as error:
                print(file_error_message(name, error), file=self.err)
                return
            print(line, file=self.out)
        else:
            print(name, file=self.out)

    def process_directory(self, directory: str) -> None:
        """List the entries of a directory, descending into it with -R."""
        if self.flags.long_format:
            try:
                blocks = total_block_count(directory, self.flags)
            except OSError as error:
                print(directory_error_message(directory, error), file=self.err)
                return
            print(f"total {blocks}", file=self.out)

        try:
            names = os.listdir(directory)
        except OSError as error:
            print(directory_error_message(directory, error), file=self.err)
            return

        subdirectories: list[str] = []
        for name in names:
            if should_skip(name, self.flags):
                continue
            path = join_path(directory, name)
            self.process_file(path, name)
            if self.flags.recursive and _is_directory(path):
                subdirectories.append(path)

        for subdirectory in subdirectories:
            print(f"\n{subdirectory}:", file=self.out)
            self.ls(subdirectory)

    def ls(self, path: str) -> None:
        """List ``path`` as a directory or as a single file."""
        if _is_directory(path):
            self.process_directory(path)
        else:
            name = path.rsplit("/", 1)[-1]
            self.process_file(path, name)


def run(
    argv: Sequence[str],
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """List the operands in ``argv``; return the exit status."""
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    flags, operands = parse_flags(argv)
    lister = Lister(flags, out, err)

    if not operands:
        if flags.recursive:
            print(f"{CURRENT_DIRECTORY}:", file=out)
        lister.ls(CURRENT_DIRECTORY)
    elif len(operands) == 1:
        operand = operands[0]
        if _is_directory(operand):
            if has_subdirectories(operand, flags, err) and flags.recursive:
                print(f"{operand}:", file=out)
        lister.ls(operand)
    else:
        printed = False
        for operand in operands:
            if not _is_directory(operand):
                lister.ls(operand)
                printed = True
        for operand in operands:
            if _is_directory(operand):
                if printed:
                    print(file=out)
                printed = True
                print(f"{operand}:", file=out)
                lister.ls(operand)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point."""
    if argv is None:
        argv = sys.argv[1:]
    return run(argv, sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())