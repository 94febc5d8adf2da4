"""Path utilities: split an absolute path under a location root into index keys.

These helpers centralize the rules used by the isolated file path key:
- Materialized path is the parent directory, always framed by '/'; root is '/';
- Relative path is '/'-separated and carries no framing slashes; root is '';
- Extension is lowercased without the leading dot; hidden files ('.bashrc')
  and names ending with a dot have none.

The materialized path is built from the host path components, so a backslash
inside a POSIX file name never counts as a separator. Only the relative path
replaces backslashes with '/', so that keys built on Windows and on Unix-like
hosts compare equal.
"""

from __future__ import annotations

import os
from pathlib import PurePath
from typing import Optional, Tuple, Type, Union

from location_index.core.constants import ROOT_MATERIALIZED_PATH
from location_index.core.exceptions import NonUtf8PathError, UnableToExtractMaterializedPathError

PathInput = Union[str, bytes, "os.PathLike[str]", PurePath]


def as_pure_path(path: PathInput, like: Optional[Type[PurePath]] = None) -> PurePath:
    """Coerce ``path`` into a pure path, keeping the flavour of ``PurePath`` inputs.

    Bytes are decoded with the filesystem encoding; undecodable bytes survive as
    surrogate escapes and are rejected later by :func:`_to_text`.
    """
    if isinstance(path, PurePath):
        if like is None or isinstance(path, like):
            return path
        return like(path)
    return (like or PurePath)(os.fsdecode(path))


def _strip_location_prefix(location_id: int, location_path: PathInput, path: PathInput) -> PurePath:
    full_path = as_pure_path(path)
    root = as_pure_path(location_path, type(full_path))
    try:
        return full_path.relative_to(root)
    except ValueError as exc:
        raise UnableToExtractMaterializedPathError(location_id, path) from exc


def _to_text(relative: PurePath, source_path: PathInput) -> str:
    if not relative.parts:
        return ""
    text = str(relative)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise NonUtf8PathError(source_path) from exc
    return text.replace("\\", "/")


def extract_relative_path(location_id: int, location_path: PathInput, path: PathInput) -> str:
    """Return ``path`` relative to ``location_path``, '/'-separated.

    Example:
        location_path = "/spacedrive/location"
        path = "/spacedrive/location/dir/file.txt"
        -> "dir/file.txt"
    """
    return _to_text(_strip_location_prefix(location_id, location_path, path), path)


def extract_normalized_materialized_path(location_id: int, location_path: PathInput, path: PathInput) -> str:
    """Return the materialized path (parent directory framed by '/') of ``path``.

    Example:
        location_path = "/spacedrive/location"
        path = "/spacedrive/location/dir/dir2/file.txt"
        -> "/dir/dir2/"
    """
    return normalize_location_path(location_id, location_path, path)[0]


def normalize_location_path(location_id: int, location_path: PathInput, path: PathInput) -> Tuple[str, str]:
    """Strip the location root once and return ``(materialized_path, relative_path)``.

    The parent comes from the components of the host-flavoured path, so
    ``dir\\file.txt`` on POSIX stays one entry at the root.

    Example:
        location_path = "/spacedrive/location"
        path = "/spacedrive/location/dir/dir2/file.txt"
        -> ("/dir/dir2/", "dir/dir2/file.txt")
    """
    relative = _strip_location_prefix(location_id, location_path, path)
    relative_path = _to_text(relative, path)
    parent_parts = relative.parts[:-1]
    if not parent_parts:
        return ROOT_MATERIALIZED_PATH, relative_path
    return "/" + "/".join(parent_parts) + "/", relative_path


def split_name_and_extension(name: str, is_dir: bool) -> Tuple[str, str]:
    """Split a bare entry name into ``(stem, extension)``."""
    if is_dir:
        return name, ""
    last_dot_idx = name.rfind(".")
    # hidden file, no dot at all, or a trailing dot with nothing after it
    if last_dot_idx <= 0 or last_dot_idx == len(name) - 1:
        return name, ""
    return name[:last_dot_idx], name[last_dot_idx + 1:].lower()


def _frame(head: str) -> str:
    if not head:
        return ROOT_MATERIALIZED_PATH
    return head if head.startswith("/") else "/" + head


def separate_path_name_and_extension(
    source: str, is_dir: bool
) -> Tuple[str, Optional[str], Optional[str]]:
    """Split a relative path string into ``(materialized_path, name, extension)``.

    ``source`` may carry a leading '/'; directories may carry a trailing '/'.
    The root ('/' or '') has neither name nor extension.

    Example:
        "dir/dir2/file.TXT", is_dir=False -> ("/dir/dir2/", "file", "txt")
        "dir/dir2/", is_dir=True          -> ("/dir/", "dir2", None)
    """
    if source in ("", ROOT_MATERIALIZED_PATH):
        return ROOT_MATERIALIZED_PATH, None, None

    if is_dir:
        last_char_idx = len(source) - 1 if source.endswith("/") else len(source)
        first_name_char_idx = source.rfind("/", 0, last_char_idx) + 1
        return _frame(source[:first_name_char_idx]), source[first_name_char_idx:last_char_idx], None

    first_name_char_idx = source.rfind("/") + 1
    name, extension = split_name_and_extension(source[first_name_char_idx:], False)
    return _frame(source[:first_name_char_idx]), name, extension or None


__all__ = [
    "PathInput",
    "as_pure_path",
    "extract_relative_path",
    "extract_normalized_materialized_path",
    "normalize_location_path",
    "split_name_and_extension",
    "separate_path_name_and_extension",
]
