"""异常处理模块：定义路径键构造与记录还原过程中的统一异常。"""

from __future__ import annotations

from typing import Any


class FilePathError(Exception):
    """携带统一结构（msg + data）的路径异常基类，调用方可据此统一转换。"""

    def __init__(self, msg: str, data: Any = None) -> None:
        super().__init__(msg)
        self.msg = msg
        self.data = data


class UnableToExtractMaterializedPathError(FilePathError):
    """路径不在给定 location 根目录之下。"""

    def __init__(self, location_id: int, path: Any) -> None:
        super().__init__(
            f"unable to extract materialized path from location <id='{location_id}', path='{path}'>",
            data={"location_id": location_id, "path": str(path)},
        )
        self.location_id = location_id
        self.path = path


class NonUtf8PathError(FilePathError):
    """剥离根前缀后的路径无法表示为文本。"""

    def __init__(self, path: Any) -> None:
        super().__init__(f"received a non UTF-8 path: <path='{path!r}'>", data={"path": repr(path)})
        self.path = path


class InvalidFilenameAndExtensionError(FilePathError):
    """裸文件名中包含路径分隔符。"""

    def __init__(self, source: str) -> None:
        super().__init__(f"invalid file name and extension: <source='{source}'>", data={"source": source})
        self.source = source


class BackslashInPathError(FilePathError):
    """POSIX 路径组件中包含反斜杠，无法用 '/' 分隔的路径键表示。"""

    def __init__(self, location_id: int, path: Any) -> None:
        super().__init__(
            f"path component contains a backslash <location_id='{location_id}', path='{path}'>",
            data={"location_id": location_id, "path": str(path)},
        )
        self.location_id = location_id
        self.path = path


class ForbiddenFileNameError(FilePathError):
    """文件名不被当前文件名策略接受。"""

    def __init__(self, name: str) -> None:
        super().__init__(f"forbidden file name: <name='{name}'>", data={"name": name})
        self.name = name


class MissingFieldError(FilePathError):
    """存储记录缺少还原路径键所需的字段。"""

    def __init__(self, field_name: str) -> None:
        super().__init__(f"missing field on database: {field_name}", data={"field_name": field_name})
        self.field_name = field_name


class LocationNotFoundError(FilePathError):
    def __init__(self, location_id: int) -> None:
        super().__init__(f"location not found: <id='{location_id}'>", data={"location_id": location_id})
        self.location_id = location_id


class CorruptedFilePathError(RuntimeError):
    """上游数据损坏：正确构造的路径键永远不会触发，调用方不应捕获后继续。"""
