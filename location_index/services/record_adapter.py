"""存储记录 -> 路径键 的还原。

存储层返回的记录字段可能缺失（NULL 或者根本不在查询结果里），还原前逐项检查，
缺哪一项就以 ``MissingFieldError("file_path.<字段>")`` 报出哪一项。

记录形态由 ``RecordShape`` 描述：带 ``location_id`` 的完整记录，或者
不带 ``location_id``、由调用方另行提供的精简记录。记录本身可以是 ORM 行、
字典或任意带同名属性的对象。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping, Optional

from location_index.core.constants import FILE_PATH_FIELD_PREFIX
from location_index.core.exceptions import MissingFieldError
from location_index.core.logger import logger
from location_index.services.isolated_file_path import IsolatedFilePathData

_KEY_FIELDS = ("is_dir", "materialized_path", "name", "extension")


@dataclass(frozen=True)
class RecordShape:
    name: str
    has_location_id: bool = True
    field_prefix: str = FILE_PATH_FIELD_PREFIX

    @property
    def required_fields(self) -> tuple[str, ...]:
        if self.has_location_id:
            return ("location_id", *_KEY_FIELDS)
        return _KEY_FIELDS


FILE_PATH_SHAPE = RecordShape("file_path")
FILE_PATH_WITHOUT_LOCATION_SHAPE = RecordShape("file_path_without_location", has_location_id=False)


def _read_field(raw: Any, field_name: str) -> Any:
    if isinstance(raw, Mapping):
        return raw.get(field_name)
    return getattr(raw, field_name, None)


def maybe_missing(value: Any, field_name: str) -> Any:
    if value is None:
        raise MissingFieldError(field_name)
    return value


def from_record(
    raw: Any,
    *,
    shape: Optional[RecordShape] = None,
    location_id: Optional[int] = None,
) -> IsolatedFilePathData:
    """把一条存储记录还原为路径键。

    未指定 ``shape`` 时：传入了 ``location_id`` 视为精简记录，否则视为完整记录。
    精简记录必须由调用方提供 ``location_id``。
    """
    if shape is None:
        shape = FILE_PATH_WITHOUT_LOCATION_SHAPE if location_id is not None else FILE_PATH_SHAPE

    values = {}
    for field_name in shape.required_fields:
        qualified = f"{shape.field_prefix}.{field_name}"
        try:
            values[field_name] = maybe_missing(_read_field(raw, field_name), qualified)
        except MissingFieldError:
            logger.debug("Record of shape %s is missing %s", shape.name, qualified)
            raise

    if not shape.has_location_id:
        values["location_id"] = maybe_missing(location_id, f"{shape.field_prefix}.location_id")

    return IsolatedFilePathData.from_db_data(
        values["location_id"],
        bool(values["is_dir"]),
        values["materialized_path"],
        values["name"],
        values["extension"],
    )


def from_location_and_record(location_id: int, raw: Any) -> IsolatedFilePathData:
    """精简记录（不含 location_id）的成对输入形式。"""
    return from_record(raw, shape=FILE_PATH_WITHOUT_LOCATION_SHAPE, location_id=location_id)


def from_records(
    rows: Iterable[Any],
    *,
    shape: Optional[RecordShape] = None,
    location_id: Optional[int] = None,
) -> Iterator[IsolatedFilePathData]:
    for row in rows:
        yield from_record(row, shape=shape, location_id=location_id)


__all__ = [
    "RecordShape",
    "FILE_PATH_SHAPE",
    "FILE_PATH_WITHOUT_LOCATION_SHAPE",
    "maybe_missing",
    "from_record",
    "from_location_and_record",
    "from_records",
]
