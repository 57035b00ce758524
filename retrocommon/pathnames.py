"""Pure string operations on path names: extensions, base names,
directories, archive delimiters and slash handling."""

from __future__ import annotations

import os

DEFAULT_SLASH = "\\" if os.name == "nt" else "/"
"""The slash this platform prefers when one has to be added."""

_SLASHES = ("/", "\\") if os.name == "nt" else ("/",)
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_COMPRESSED_EXTENSIONS = ("zip", "apk", "7z")


def _lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def _is_slash(ch: str) -> bool:
    return ch in _SLASHES


def get_archive_delim(path: str) -> int | None:
    """Index of the first '#' that directly follows an archive extension.

    Only '.zip', '.apk' and '.7z' (in any case) count. Returns ``None``
    when the path does not point inside an archive.
    """
    delim = path.find("#")
    while delim >= 0:
        if delim > 4:
            tail = _lower(path[delim - 4 : delim])
            if tail in (".zip", ".apk") or tail[1:] == ".7z":
                return delim
        elif delim > 3:
            if _lower(path[delim - 3 : delim]) == ".7z":
                return delim
        delim = path.find("#", delim + 1)
    return None


def find_last_slash(path: str) -> int | None:
    """Index of the last '/' or '\\' in ``path``, or ``None`` if there is none."""
    last = max(path.rfind("/"), path.rfind("\\"))
    return None if last < 0 else last


def _basename_start(path: str) -> int:
    cut = get_archive_delim(path)
    if cut is None:
        cut = find_last_slash(path)
    return 0 if cut is None else cut + 1


def basename(path: str) -> str:
    """File name part of ``path``.

    Cuts at the archive delimiter if there is one, else at the last slash.
    """
    return path[_basename_start(path) :]


def basename_nocompression(path: str) -> str:
    """File name part of ``path``, cutting only at the last slash."""
    last = find_last_slash(path)
    return path if last is None else path[last + 1 :]


def _extension_dot(path: str) -> int | None:
    """Index in ``path`` of the last '.' of its base name."""
    if not path:
        return None
    start = _basename_start(path)
    dot = path.rfind(".", start)
    return None if dot < 0 else dot


def get_extension(path: str) -> str:
    """Extension of ``path`` without the dot, or "" when it has none."""
    dot = _extension_dot(path)
    return "" if dot is None else path[dot + 1 :]


def remove_extension(path: str) -> str | None:
    """``path`` with its extension (from the last '.') removed.

    Returns ``None`` when the path is empty or has no extension.
    """
    dot = _extension_dot(path)
    return None if dot is None else path[:dot]


def is_compressed_file(path: str) -> bool:
    """True when the extension names a zip, apk or 7z archive."""
    ext = get_extension(path)
    return bool(ext) and _lower(ext) in _COMPRESSED_EXTENSIONS


def is_absolute(path: str) -> bool:
    """True when ``path`` is absolute on this platform."""
    if not path:
        return False
    if path[0] == "/":
        return True
    if os.name == "nt":
        return (
            path.startswith("\\\\")
            or path[1:].startswith(":/")
            or path[1:].startswith(":\\")
        )
    return False


def basedir(path: str) -> str:
    """Directory part of ``path``, keeping the trailing slash.

    A path with no slash gives the current directory, "./". Paths of
    fewer than two characters are returned unchanged.
    """
    if len(path) < 2:
        return path
    last = find_last_slash(path)
    if last is None:
        return "." + DEFAULT_SLASH
    return path[: last + 1]


def basedir_wrapper(path: str) -> str:
    """Like :func:`basedir`, but gives the directory holding an archive
    when ``path`` points inside one."""
    if len(path) < 2:
        return path
    delim = get_archive_delim(path)
    if delim is not None:
        path = path[:delim]
    last = find_last_slash(path)
    if last is None:
        return "." + DEFAULT_SLASH
    return path[: last + 1]


def parent_dir(path: str) -> str:
    """Parent of directory ``path``, keeping the trailing slash.

    Returns "" when ``path`` is already the root directory.
    """
    if path and _is_slash(path[-1]):
        was_absolute = is_absolute(path)
        path = path[:-1]
        if was_absolute and find_last_slash(path) is None:
            return ""
    return basedir(path)


def parent_dir_name(path: str) -> str | None:
    """Name of the directory that holds the last component of ``path``.

    Trailing slashes are ignored. Returns ``None`` when no such name exists.
    """
    temp = path
    last = find_last_slash(temp)
    if last is not None and last == len(temp) - 1:
        temp = temp[:last]
        last = find_last_slash(temp)
    if last is not None:
        temp = temp[:last]
    slash = find_last_slash(temp)
    piece = temp if slash is None else temp[slash:]
    if len(piece) < 2:
        return None
    if is_absolute(piece):
        return piece[1:]
    return piece


def replace_extension(path: str, replace: str) -> str:
    """Swap the extension of ``path`` (from its last '.') for ``replace``.

    Without an extension ``replace`` is simply appended.
    """
    dot = _extension_dot(path)
    stem = path if dot is None else path[:dot]
    return stem + replace


def ensure_slash(path: str) -> str:
    """Append a slash to directory ``path`` unless it already ends in one.

    The kind of slash already used in the path is kept.
    """
    last = find_last_slash(path)
    if last is None:
        return path + DEFAULT_SLASH
    if last != len(path) - 1:
        return path + path[last]
    return path


def fill_pathname_dir(in_dir: str, in_basename: str, replace: str) -> str:
    """Join ``in_dir`` with the base name of ``in_basename`` and ``replace``."""
    return ensure_slash(in_dir) + basename(in_basename) + replace


def conform_slashes_to_os(path: str) -> str:
    """Turn every slash and backslash into this platform's slash."""
    return path.replace("/", DEFAULT_SLASH).replace("\\", DEFAULT_SLASH)


def make_slashes_portable(path: str) -> str:
    """Turn every backslash into a forward slash."""
    return path.replace("\\", "/")