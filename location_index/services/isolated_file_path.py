"""隔离路径键：在 location 内唯一标识一个文件或目录。

``IsolatedFilePathData`` 是不可变值对象，由四种方式构造：
- ``from_full_path``：宿主系统绝对路径 + location 根目录；
- ``from_relative_str``：以 '/' 分隔的相对路径字符串；
- ``from_db_data``：存储记录中的原始字段；
- ``parent()``：由已有路径键推导父目录。

``(location_id, materialized_path, name, extension)`` 是自然键；
``relative_path`` 为派生字段，不参与相等比较与哈希。由存储字段、相对路径
字符串或 ``parent()`` 得到的键，其 ``relative_path`` 与其余字段重新拼接的结果
一致；``from_full_path`` 保留宿主路径中扩展名的原有大小写。
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import Any, Dict, Optional, Tuple

from sqlalchemy import and_

from location_index.core.constants import ROOT_MATERIALIZED_PATH
from location_index.core.exceptions import (
    BackslashInPathError,
    CorruptedFilePathError,
    InvalidFilenameAndExtensionError,
)
from location_index.models.file_path import FilePath
from location_index.schemas.file_path import IsolatedFilePathSchema
from location_index.utils.path_utils import (
    PathInput,
    normalize_location_path,
    separate_path_name_and_extension,
    split_name_and_extension,
)


def assemble_relative_path(materialized_path: str, name: str, extension: str, is_dir: bool) -> str:
    """按规范字段拼出相对路径：去掉 materialized_path 开头的 '/' 再接上完整名称。"""
    if not is_dir and extension:
        return f"{materialized_path[1:]}{name}.{extension}"
    return f"{materialized_path[1:]}{name}"


@dataclass(frozen=True)
class IsolatedFilePathData:
    location_id: int
    materialized_path: str
    is_dir: bool
    name: str
    extension: str
    relative_path: str = field(compare=False)

    def __post_init__(self) -> None:
        mp = self.materialized_path
        if not (mp.startswith("/") and mp.endswith("/")):
            raise CorruptedFilePathError(f"malformed materialized path: {mp!r}")
        if self.is_dir and self.extension:
            raise CorruptedFilePathError(f"directory with extension: {self.extension!r}")
        if self.extension != self.extension.lower():
            raise CorruptedFilePathError(f"extension must be lowercase: {self.extension!r}")
        if "\\" in self.relative_path:
            raise CorruptedFilePathError(f"relative path with backslash: {self.relative_path!r}")

    # ------------------------------------------------------------------
    # 构造
    # ------------------------------------------------------------------
    @classmethod
    def from_full_path(
        cls,
        location_id: int,
        location_path: PathInput,
        full_path: PathInput,
        is_dir: bool,
    ) -> "IsolatedFilePathData":
        """由绝对路径构造；``full_path`` 等于根目录时得到 location 根键。

        ``relative_path`` 取自归一化结果，保留扩展名原有大小写，
        ``full_path()`` 据此还原宿主系统上的真实路径。

        Raises:
            UnableToExtractMaterializedPathError: ``full_path`` 不在根目录下。
            NonUtf8PathError: 相对部分无法表示为文本。
            BackslashInPathError: POSIX 路径组件中含有反斜杠。
        """
        materialized_path, relative_path = normalize_location_path(location_id, location_path, full_path)
        entry_name = relative_path[len(materialized_path) - 1 :]
        if "\\" in materialized_path or "/" in entry_name:
            raise BackslashInPathError(location_id, full_path)
        name, extension = split_name_and_extension(entry_name, is_dir) if entry_name else ("", "")
        return cls(
            location_id=location_id,
            materialized_path=materialized_path,
            is_dir=is_dir,
            name=name,
            extension=extension,
            relative_path=relative_path,
        )

    @classmethod
    def from_relative_str(
        cls,
        location_id: int,
        relative_path_str: str,
        is_dir: Optional[bool] = None,
    ) -> "IsolatedFilePathData":
        """由相对路径字符串构造；未指定 ``is_dir`` 时以结尾是否为 '/' 判断。"""
        source = relative_path_str.replace("\\", "/")
        if is_dir is None:
            is_dir = source.endswith("/")
        materialized_path, name, extension = separate_path_name_and_extension(source, is_dir)
        if name is None:
            # location 根目录
            return cls.root(location_id)
        return cls.from_db_data(location_id, is_dir, materialized_path, name, extension or "")

    @classmethod
    def from_db_data(
        cls,
        location_id: int,
        is_dir: bool,
        materialized_path: str,
        name: str,
        extension: str,
    ) -> "IsolatedFilePathData":
        return cls(
            location_id=location_id,
            materialized_path=materialized_path,
            is_dir=is_dir,
            name=name,
            extension=extension,
            relative_path=assemble_relative_path(materialized_path, name, extension, is_dir),
        )

    @classmethod
    def root(cls, location_id: int) -> "IsolatedFilePathData":
        return cls(location_id, ROOT_MATERIALIZED_PATH, True, "", "", "")

    @classmethod
    def from_schema(cls, schema: IsolatedFilePathSchema) -> "IsolatedFilePathData":
        return cls.from_db_data(
            schema.location_id, schema.is_dir, schema.materialized_path, schema.name, schema.extension
        )

    # ------------------------------------------------------------------
    # 派生
    # ------------------------------------------------------------------
    def is_root(self) -> bool:
        return (
            self.is_dir
            and self.materialized_path == ROOT_MATERIALIZED_PATH
            and not self.name
            and not self.relative_path
        )

    def parent(self) -> "IsolatedFilePathData":
        """返回所在目录的路径键；根目录下的条目与根目录本身都返回根键。"""
        if self.materialized_path == ROOT_MATERIALIZED_PATH:
            return self.root(self.location_id)

        trailing_slash_idx = len(self.materialized_path) - 1
        last_slash_idx = self.materialized_path.rfind("/", 0, trailing_slash_idx)
        if last_slash_idx < 0:
            raise CorruptedFilePathError(
                f"malformed materialized path at `parent`: {self.materialized_path!r}"
            )

        return IsolatedFilePathData(
            location_id=self.location_id,
            materialized_path=self.materialized_path[: last_slash_idx + 1],
            is_dir=True,
            name=self.materialized_path[last_slash_idx + 1 : trailing_slash_idx],
            extension="",
            relative_path=self.materialized_path[1:trailing_slash_idx],
        )

    def full_name(self) -> str:
        if not self.extension:
            return self.name
        return f"{self.name}.{self.extension}"

    def materialized_path_for_children(self) -> Optional[str]:
        """子条目的 materialized_path；文件没有子条目，返回 ``None``。"""
        if self.materialized_path == ROOT_MATERIALIZED_PATH and not self.name and self.is_dir:
            return ROOT_MATERIALIZED_PATH
        if not self.is_dir:
            return None
        return f"{self.materialized_path}{self.name}/"

    @staticmethod
    def separate_name_and_extension_from_str(source: str) -> Tuple[str, str]:
        """拆分裸文件名；包含路径分隔符时抛出 ``InvalidFilenameAndExtensionError``。"""
        if "/" in source or os.sep in source:
            raise InvalidFilenameAndExtensionError(source)
        return split_name_and_extension(source, False)

    def full_path(self, location_path: PathInput) -> PurePath:
        """把路径键拼回 location 根目录，得到宿主系统上的路径。"""
        root = location_path if isinstance(location_path, PurePath) else Path(os.fsdecode(location_path))
        if not self.relative_path:
            return root
        return root.joinpath(*self.relative_path.split("/"))

    # ------------------------------------------------------------------
    # 存储层查询条件
    # ------------------------------------------------------------------
    def unique_where(self) -> Dict[str, Any]:
        """唯一键选择器，可直接用于 ``Query.filter_by(**selector)``。"""
        return {
            "location_id": self.location_id,
            "materialized_path": self.materialized_path,
            "name": self.name,
            "extension": self.extension,
        }

    def where(self):
        """等值谓词，与 ``is_dir`` 无关。"""
        return and_(
            FilePath.location_id == self.location_id,
            FilePath.materialized_path == self.materialized_path,
            FilePath.name == self.name,
            FilePath.extension == self.extension,
        )

    def to_schema(self) -> IsolatedFilePathSchema:
        return IsolatedFilePathSchema.model_validate(self)

    def __str__(self) -> str:
        return self.relative_path

    def __fspath__(self) -> str:
        return self.relative_path


__all__ = ["IsolatedFilePathData", "assemble_relative_path"]
