"""文件路径服务：把路径键与存储层串起来。

独立函数形式，调用方自行管理 Session 生命周期。
"""

from __future__ import annotations

from typing import Any, List, Optional

from sqlalchemy.orm import Session

from location_index.core.exceptions import ForbiddenFileNameError, LocationNotFoundError
from location_index.core.logger import logger
from location_index.crud.file_path import file_path_crud
from location_index.crud.location import location_crud
from location_index.models.file_path import FilePath
from location_index.services.isolated_file_path import IsolatedFilePathData
from location_index.services.record_adapter import from_records
from location_index.utils.filename_validator import accept_file_name
from location_index.utils.path_utils import PathInput


def isolated_path_for(db: Session, location_id: int, full_path: PathInput, is_dir: bool) -> IsolatedFilePathData:
    """按 location 在库中登记的根目录，把绝对路径转换为路径键。"""
    location = location_crud.get(db, location_id)
    if location is None:
        logger.warning("Location %s is not registered", location_id, extra={"location_id": location_id})
        raise LocationNotFoundError(location_id)
    return IsolatedFilePathData.from_full_path(location.id, location.path, full_path, is_dir)


def get_file_path(db: Session, path: IsolatedFilePathData) -> Optional[FilePath]:
    return file_path_crud.get_by_isolated_path(db, path)


def ensure_file_path(
    db: Session,
    path: IsolatedFilePathData,
    *,
    parents: bool = False,
    auto_commit: bool = True,
    **extra: Any,
) -> FilePath:
    """确保路径键对应的记录存在，不存在则写入。

    - ``parents=True`` 时沿 ``parent()`` 向上补齐缺失的目录记录（含根目录），
      整条链在同一事务中写入，失败时整体回滚；
    - 名称不被当前文件名策略接受时抛出 ``ForbiddenFileNameError``。
    """
    existing = file_path_crud.get_by_isolated_path(db, path)
    if existing is not None:
        return existing

    if not path.is_root() and not accept_file_name(path.full_name()):
        raise ForbiddenFileNameError(path.full_name())

    try:
        if parents and not path.is_root():
            ensure_file_path(db, path.parent(), parents=True, auto_commit=False)

        logger.debug(
            "Inserting file path <location_id=%s, path='%s'>",
            path.location_id,
            path,
            extra={"location_id": path.location_id},
        )
        db_obj = file_path_crud.create_from_isolated_path(db, path, auto_commit=False, **extra)
        if auto_commit:
            db.commit()
            db.refresh(db_obj)
        return db_obj
    except Exception:
        if auto_commit:
            db.rollback()
        raise


def get_parent(db: Session, path: IsolatedFilePathData) -> Optional[FilePath]:
    return file_path_crud.get_by_isolated_path(db, path.parent())


def rehydrate(rows: List[Any], *, location_id: Optional[int] = None) -> List[IsolatedFilePathData]:
    """把存储记录批量还原为路径键；传入 ``location_id`` 时按精简记录处理。"""
    return list(from_records(rows, location_id=location_id))


def list_children_paths(db: Session, path: IsolatedFilePathData) -> List[IsolatedFilePathData]:
    return rehydrate(file_path_crud.list_children(db, path))


__all__ = [
    "isolated_path_for",
    "get_file_path",
    "ensure_file_path",
    "get_parent",
    "rehydrate",
    "list_children_paths",
]
