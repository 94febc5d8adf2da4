"""存储记录还原为路径键的测试。"""

from types import SimpleNamespace

import pytest

from location_index.core.exceptions import MissingFieldError
from location_index.services.isolated_file_path import IsolatedFilePathData
from location_index.services.record_adapter import (
    FILE_PATH_SHAPE,
    FILE_PATH_WITHOUT_LOCATION_SHAPE,
    RecordShape,
    from_location_and_record,
    from_record,
    from_records,
)


def _raw(**overrides):
    payload = {
        "location_id": 1,
        "is_dir": False,
        "materialized_path": "/dir/dir2/",
        "name": "file",
        "extension": "txt",
    }
    payload.update(overrides)
    return payload


def test_from_mapping_record():
    path = from_record(_raw())
    assert path == IsolatedFilePathData.from_db_data(1, False, "/dir/dir2/", "file", "txt")
    assert path.relative_path == "dir/dir2/file.txt"


def test_from_attribute_record():
    path = from_record(SimpleNamespace(**_raw(is_dir=True, name="dir3", extension="")))
    assert path.is_dir
    assert path.relative_path == "dir/dir2/dir3"


@pytest.mark.parametrize("field_name", ["location_id", "is_dir", "materialized_path", "name", "extension"])
def test_missing_field_is_named(field_name):
    with pytest.raises(MissingFieldError) as exc_info:
        from_record(_raw(**{field_name: None}))
    assert exc_info.value.field_name == f"file_path.{field_name}"


def test_absent_attribute_counts_as_missing():
    raw = SimpleNamespace(location_id=1, is_dir=False, materialized_path="/", name="file")
    with pytest.raises(MissingFieldError) as exc_info:
        from_record(raw)
    assert exc_info.value.field_name == "file_path.extension"


def test_first_missing_field_wins():
    with pytest.raises(MissingFieldError) as exc_info:
        from_record(_raw(is_dir=None, name=None))
    assert exc_info.value.field_name == "file_path.is_dir"


def test_empty_strings_are_not_missing():
    path = from_record(_raw(materialized_path="/", name="", extension="", is_dir=True))
    assert path.is_root()


def test_paired_location_id_form():
    raw = _raw(location_id=None)
    path = from_location_and_record(9, raw)
    assert path.location_id == 9

    # 形态推断：传入 location_id 即按精简记录处理
    assert from_record(raw, location_id=9) == path


def test_shape_without_location_requires_explicit_id():
    with pytest.raises(MissingFieldError) as exc_info:
        from_record(_raw(), shape=FILE_PATH_WITHOUT_LOCATION_SHAPE)
    assert exc_info.value.field_name == "file_path.location_id"


def test_custom_shape_prefix():
    shape = RecordShape("thumbnail_source", has_location_id=False, field_prefix="file_path_for_thumbnailer")
    with pytest.raises(MissingFieldError) as exc_info:
        from_record(_raw(materialized_path=None), shape=shape, location_id=1)
    assert exc_info.value.field_name == "file_path_for_thumbnailer.materialized_path"


def test_required_fields_follow_shape():
    assert FILE_PATH_SHAPE.required_fields[0] == "location_id"
    assert "location_id" not in FILE_PATH_WITHOUT_LOCATION_SHAPE.required_fields


def test_from_records_is_lazy_and_ordered():
    rows = [_raw(name="a"), _raw(name="b"), _raw(name=None)]
    iterator = from_records(rows)
    assert next(iterator).name == "a"
    assert next(iterator).name == "b"
    with pytest.raises(MissingFieldError):
        next(iterator)
