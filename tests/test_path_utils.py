"""路径拆分与归一化工具的单元测试。"""

import os
from pathlib import PurePosixPath, PureWindowsPath

import pytest

from location_index.core.exceptions import NonUtf8PathError, UnableToExtractMaterializedPathError
from location_index.utils.path_utils import (
    extract_normalized_materialized_path,
    extract_relative_path,
    normalize_location_path,
    separate_path_name_and_extension,
    split_name_and_extension,
)

ROOT = "/spacedrive/location"


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/spacedrive/location", "/"),
        ("/spacedrive/location/file.txt", "/"),
        ("/spacedrive/location/dir", "/"),
        ("/spacedrive/location/dir/file.txt", "/dir/"),
        ("/spacedrive/location/dir/dir2", "/dir/"),
        ("/spacedrive/location/dir/dir2/dir3", "/dir/dir2/"),
        ("/spacedrive/location/dir/dir2/dir3/file.txt", "/dir/dir2/dir3/"),
    ],
)
def test_extract_normalized_materialized_path(path, expected):
    assert extract_normalized_materialized_path(1, ROOT, PurePosixPath(path)) == expected


def test_extract_relative_path():
    assert extract_relative_path(1, ROOT, PurePosixPath(ROOT)) == ""
    assert extract_relative_path(1, ROOT, PurePosixPath("/spacedrive/location/dir/file.txt")) == "dir/file.txt"


def test_windows_paths_are_slash_normalized():
    root = PureWindowsPath(r"C:\spacedrive\location")
    path = PureWindowsPath(r"C:\spacedrive\location\dir\dir2\file.txt")

    materialized_path, relative_path = normalize_location_path(7, root, path)

    assert materialized_path == "/dir/dir2/"
    assert relative_path == "dir/dir2/file.txt"


def test_backslash_in_posix_name_stays_in_its_component():
    literal = normalize_location_path(1, ROOT, PurePosixPath("/spacedrive/location/dir\\file.txt"))
    nested = normalize_location_path(1, ROOT, PurePosixPath("/spacedrive/location/dir/file.txt"))

    assert literal[0] == "/"
    assert nested[0] == "/dir/"


def test_path_outside_location_is_rejected():
    with pytest.raises(UnableToExtractMaterializedPathError) as exc_info:
        normalize_location_path(3, ROOT, PurePosixPath("/elsewhere/file.txt"))
    assert exc_info.value.location_id == 3
    assert exc_info.value.data["path"] == "/elsewhere/file.txt"


def test_sibling_prefix_is_not_a_match():
    # 前缀按路径组件比较，而不是按字符串比较
    with pytest.raises(UnableToExtractMaterializedPathError):
        normalize_location_path(1, ROOT, PurePosixPath("/spacedrive/location2/file.txt"))


@pytest.mark.skipif(os.name == "nt", reason="surrogate escapes only come from POSIX byte paths")
def test_undecodable_bytes_are_rejected():
    with pytest.raises(NonUtf8PathError):
        normalize_location_path(1, ROOT.encode(), b"/spacedrive/location/\xff\xfe.txt")


@pytest.mark.parametrize(
    "name, is_dir, expected",
    [
        ("file.txt", False, ("file", "txt")),
        ("archive.tar.GZ", False, ("archive.tar", "gz")),
        (".bashrc", False, (".bashrc", "")),
        ("Makefile", False, ("Makefile", "")),
        ("trailing.", False, ("trailing.", "")),
        ("my.dir", True, ("my.dir", "")),
    ],
)
def test_split_name_and_extension(name, is_dir, expected):
    assert split_name_and_extension(name, is_dir) == expected


@pytest.mark.parametrize(
    "source, is_dir, expected",
    [
        ("/", True, ("/", None, None)),
        ("", False, ("/", None, None)),
        ("file.txt", False, ("/", "file", "txt")),
        ("a", False, ("/", "a", None)),
        ("dir/dir2/file.TXT", False, ("/dir/dir2/", "file", "txt")),
        ("/dir/dir2/file.txt", False, ("/dir/dir2/", "file", "txt")),
        ("dir/.hidden", False, ("/dir/", ".hidden", None)),
        ("dir/README", False, ("/dir/", "README", None)),
        ("dir/dir2/", True, ("/dir/", "dir2", None)),
        ("dir/dir2", True, ("/dir/", "dir2", None)),
        ("dir/", True, ("/", "dir", None)),
    ],
)
def test_separate_path_name_and_extension(source, is_dir, expected):
    assert separate_path_name_and_extension(source, is_dir) == expected
