# minils

`minils` is a small `ls`-style directory lister for POSIX systems. It reads user
and group names with the `pwd` and `grp` modules, so it does not run on Windows.

It supports three flags:

- `-A`: also list hidden entries (names starting with `.`), but never `.` or `..`
- `-l`: long format. Each entry shows its type character and permission bits,
  link count, owner, group, size in bytes, modification time and name. Each
  directory listing starts with a `total N` line, where N is the sum of the
  entries' sizes in 1K blocks.
- `-R`: descend into subdirectories. Each subdirectory is listed after its
  parent under a blank line and a `path:` header.

## Installation

```
pip install .
```

## Command line

```
minils [-A] [-l] [-R] [path ...]
```

Options may be combined (`-lA`) and may come before or after paths. A `--`
argument ends option processing. Unknown option letters are ignored.

- With no path, the current directory is listed. With `-R`, the listing starts
  with a `.:` header.
- With one path, that file or directory is listed. With `-R`, a directory gets a
  `path:` header only if it has at least one listed subdirectory.
- With several paths, the files are listed first. Each directory follows under a
  `path:` header, separated from the output before it by a blank line.

If a path cannot be accessed, the command writes `ls: cannot access NAME: REASON`
to standard error. If a directory cannot be read, it writes
`ls: cannot open directory DIR/: REASON`. The exit status is always 0.

In long format, the time column shows `Mon dd HH:MM` for files changed less than
six 30-day months ago. Older files show `Mon dd YYYY`. If a user or group id has
no name, the number is shown instead.

Entries appear in the order the file system returns them. They are not sorted.

Examples:

```
minils
minils -l /etc
minils -AR some/dir
minils -l notes.txt some/dir other/dir
```

## Library use

```python
import io
from minils.listing import run

out, err = io.StringIO(), io.StringIO()
status = run(["-l", "some/dir"], out, err)
print(out.getvalue())
```

`minils.listing` provides:

- `run(argv, out, err)`, which carries out the command with the given streams.
- `main(argv=None)`, which is the command's entry point.
- `Lister`, which writes a listing to any pair of text streams. It has the methods
  `ls`, `process_directory` and `process_file`.

`minils.helpers` holds the building blocks:

- `Flags` and `parse_flags`
- `file_type_char`, `permissions_string`, `owner_name` and `group_name`
- `is_hidden_file` and `should_skip`
- `join_path`
- `format_long_entry`
- `file_block_count` and `total_block_count`
- `directory_error_message` and `file_error_message`
- `has_subdirectories`

## Tests

```
pip install ".[test]"
pytest
```