"""Building, resolving and abbreviating path names, plus dated file names
and the locations of the running program and the user's home."""

from __future__ import annotations

import locale
import os
import sys
from datetime import datetime

from retrocommon.pathnames import (
    DEFAULT_SLASH,
    basedir,
    basedir_wrapper,
    conform_slashes_to_os,
    ensure_slash,
    is_absolute,
)

_SLASHES = ("/", "\\") if os.name == "nt" else ("/",)


def _is_slash(ch: str) -> bool:
    return ch != "" and ch in _SLASHES


def _count_slashes(path: str) -> int:
    return sum(1 for ch in path if ch in _SLASHES)


def resolve_realpath(path: str, resolve_symlinks: bool = False) -> str | None:
    """Resolve ".", "..", and repeated slashes in ``path``.

    Relative paths are rebased on the current working directory. With
    ``resolve_symlinks`` the path must exist and symbolic links are
    followed. Returns ``None`` when the path cannot be resolved, e.g. a
    ".." that would climb above the root.
    """
    if os.name == "nt":
        return os.path.abspath(path) if path else None

    if resolve_symlinks:
        try:
            return os.path.realpath(path, strict=True)
        except (OSError, ValueError):
            return None

    if not is_absolute(path):
        try:
            cwd = os.getcwd()
        except OSError:
            return None
        tmp = cwd if cwd.endswith("/") else cwd + "/"
        if not path:
            return tmp
        pos = 0
    else:
        pos = len(path) - len(path.lstrip("/"))
        tmp = "/" * pos

    end = len(path)
    while True:
        nxt = path.find("/", pos)
        if nxt < 0:
            nxt = end
        segment = path[pos:nxt]
        if segment == "..":
            if len(tmp) == 1 or tmp[-2] == "/":
                return None
            tmp = tmp[: tmp.rfind("/", 0, len(tmp) - 1) + 1]
        elif segment in (".", ""):
            pass
        else:
            tmp += path[pos : nxt + 1]
        pos = nxt + 1
        if nxt >= end:
            break
    return tmp


def relative_to(path: str, base: str) -> str:
    """Express absolute ``path`` relative to base directory ``base``.

    ``base`` is expected to end with a slash; neither path should hold
    "." or ".." components.
    """
    if (
        os.name == "nt"
        and len(path) >= 2
        and len(base) >= 2
        and path[1] == ":"
        and base[1] == ":"
        and path[0] != base[0]
    ):
        return path

    common = 0
    cut = 0
    for a, b in zip(path, base):
        if a != b:
            break
        if a == DEFAULT_SLASH:
            cut = common + 1
        common += 1

    trimmed_base = base[common:]
    ups = trimmed_base.count(DEFAULT_SLASH)
    return (".." + DEFAULT_SLASH) * ups + path[cut:]


def resolve_relative(refpath: str, path: str) -> str:
    """Join the directory of ``refpath`` with ``path`` and tidy the result.

    An absolute ``path`` is returned unchanged.
    """
    if is_absolute(path):
        return path
    joined = basedir(refpath) + path
    resolved = resolve_realpath(joined, False)
    return joined if resolved is None else resolved


def join(directory: str, path: str) -> str:
    """Join ``directory`` and ``path`` with exactly one slash between them."""
    out = ensure_slash(directory) if directory else directory
    return out + path


def join_special_ext(directory: str, path: str, last: str, ext: str) -> str:
    """Join ``directory``, ``path`` and ``last``, then append ``ext``."""
    out = join(directory, path)
    if out:
        out = ensure_slash(out)
    return out + last + ext


def join_delim(directory: str, path: str | None, delim: str) -> str:
    """Join ``directory`` and ``path`` with the single character ``delim``."""
    return directory + delim + (path or "")


def expand_special(
    path: str, home: str | None = None, app_dir: str | None = None
) -> str:
    """Expand a leading "~" to the home directory and ":" to the program's.

    ``home`` and ``app_dir`` default to :func:`home_dir` and
    :func:`application_dir`.
    """
    prefix: str | None = None
    if path.startswith("~"):
        prefix = home_dir() if home is None else home
    elif path.startswith(":"):
        prefix = application_dir() if app_dir is None else app_dir

    if not prefix:
        return path
    out = prefix
    if not _is_slash(out[-1]):
        out += DEFAULT_SLASH
    return out + path[2:]


def abbreviate_special(
    path: str, home: str | None = None, app_dir: str | None = None
) -> str:
    """Replace a leading program directory by ":" or home directory by "~".

    The program directory is tried first, so a program installed inside
    the home directory abbreviates to ":".
    """
    if app_dir is None:
        app_dir = application_dir()
    if home is None:
        home = home_dir()

    for candidate, notation in ((app_dir, ":"), (home, "~")):
        if candidate and path.startswith(candidate):
            rest = path[len(candidate) :]
            out = notation
            if not _is_slash(rest[:1]):
                out += DEFAULT_SLASH
            return out + rest
    return path


def abbreviated_or_relative(
    refpath: str, path: str, home: str | None = None, app_dir: str | None = None
) -> str:
    """Give ``path`` either relative to ``refpath`` or abbreviated.

    Whichever form has fewer slashes wins; on a tie the relative one does.
    """
    if app_dir is None:
        app_dir = application_dir()
    if home is None:
        home = home_dir()

    path_conformed = conform_slashes_to_os(path)
    refpath_conformed = conform_slashes_to_os(refpath)

    expanded = expand_special(path_conformed, home, app_dir)
    if is_absolute(expanded):
        absolute = expanded
    else:
        absolute = resolve_relative(refpath_conformed, path_conformed)
    absolute = conform_slashes_to_os(absolute)

    relative = relative_to(absolute, refpath_conformed)
    abbreviated = abbreviate_special(absolute, home, app_dir)

    if _count_slashes(relative) <= _count_slashes(abbreviated):
        return relative
    return abbreviated


def dated_filename(ext: str, when: datetime | None = None) -> str:
    """Name of the form "RetroArch-MMDD-HHMMSS" followed by ``ext``."""
    when = datetime.now() if when is None else when
    return when.strftime("RetroArch-%m%d-%H%M%S") + ext


def str_dated_filename(prefix: str, ext: str, when: datetime | None = None) -> str:
    """Name of the form "<prefix>-YYMMDD-HHMMSS[.ext]"."""
    when = datetime.now() if when is None else when
    stamp = when.strftime("-%y%m%d-%H%M%S")
    if not ext:
        return prefix + stamp
    return prefix + stamp + "." + ext


def strftime_am_pm(fmt: str, when: datetime | None = None) -> str:
    """Format ``when`` using the user's locale, so AM/PM names are localised."""
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error:
        pass
    when = datetime.now() if when is None else when
    return when.strftime(fmt)


def application_path() -> str:
    """Full path of the running program's executable, or "" if unknown."""
    if os.name != "nt":
        pid = os.getpid()
        for entry in ("exe", "file", "path/a.out"):
            try:
                return os.readlink(f"/proc/{pid}/{entry}")
            except OSError:
                continue
    return sys.executable or ""


def application_dir() -> str:
    """Directory holding the running program, with a trailing slash."""
    return basedir_wrapper(application_path())


def home_dir() -> str:
    """The HOME environment variable, or "" when it is not set."""
    return os.environ.get("HOME", "")