# retrocommon

A small, dependency-free library of path, text-encoding and string helpers.

## Modules

- `retrocommon.strcompat`: `strlcpy`, `strlcat`, `strcasecmp`,
  `strcasestr`, `isblank` and `tokenize`. They follow the truncation and
  ASCII case-folding rules of the classic C helpers. `strlcpy` and
  `strlcat` return the resulting text together with the length the result
  would have had untruncated.
- `retrocommon.utf`: conversions between UTF-8 bytes and UTF-16 and
  UTF-32 code units. It provides `utf8_conv_utf32`, `utf16_conv_utf8`,
  `utf8cpy`, `utf8skip`, `utf8len`, `utf8_walk`, `utf16_to_char_string`,
  `utf8_to_utf16` and `utf16_to_utf8`. It also has
  `utf8_to_local_string` and `local_to_utf8_string`. These two recode only
  on Windows and hand back the bytes unchanged on other systems.
- `retrocommon.pathnames`: path-name splitting as pure string operations.
  It understands archive delimiters such as `pack.zip#game.gba`. Functions:
  - `basename`, `basename_nocompression`, `basedir`, `basedir_wrapper`
  - `parent_dir`, `parent_dir_name`
  - `get_extension`, `remove_extension`, `replace_extension`
  - `is_compressed_file`, `is_absolute`, `get_archive_delim`
  - `find_last_slash`, `ensure_slash`, `fill_pathname_dir`
  - `conform_slashes_to_os`, `make_slashes_portable`
- `retrocommon.pathjoin`: joining, resolving and abbreviating paths, and
  building file names. Functions:
  - joining: `join`, `join_special_ext`, `join_delim`
  - resolving: `resolve_realpath`, `relative_to`, `resolve_relative`
  - abbreviation with `~` for the home directory and `:` for the program
    directory: `expand_special`, `abbreviate_special`,
    `abbreviated_or_relative`
  - dated file names: `dated_filename`, `str_dated_filename`
  - locale-aware time formatting: `strftime_am_pm`
  - program and home locations: `application_path`, `application_dir`,
    `home_dir`

## Installation

```
pip install .
```

## Examples

```python
from retrocommon.pathnames import basename, get_extension, replace_extension

basename("/roms/pack.zip#game.gba")          # "game.gba"
get_extension("/roms/game.gba")              # "gba"
replace_extension("/foo/bar/boo.c", ".asm")  # "/foo/bar/boo.asm"

from retrocommon.pathjoin import join, relative_to

join("/tmp/some_dir", "file.txt")            # "/tmp/some_dir/file.txt"
relative_to("/a/b/e/f.cg", "/a/b/c/d/")      # "../../e/f.cg"

from retrocommon.strcompat import strlcpy, tokenize

strlcpy("hello", 3)                          # ("he", 5)
list(tokenize("a,,b", ","))                  # ["a", "b"]

from retrocommon.utf import utf16_conv_utf8, utf8len

utf16_conv_utf8([0x48, 0xE9])                # b"H\xc3\xa9"
utf8len(b"h\xc3\xa9llo")                     # 5
```

## What it does not do

This package works on path names as strings. It does not query or change
the filesystem: it does not stat files, check whether a path is a
directory, report file sizes or create directories. The one exception is
`resolve_realpath(path, resolve_symlinks=True)`, which follows links on
disk. The package also has no threading primitives such as locks,
condition variables, semaphores or thread wrappers. Use the standard
library (`os`, `pathlib`, `threading`) for those.

## Running the tests

```
pip install .[test]
pytest
```