"""FilePath CRUD：以隔离路径键为条件的查询与写入。"""

from __future__ import annotations

from typing import Any, List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from location_index.crud.base import CRUDBase
from location_index.models.file_path import FilePath
from location_index.services.isolated_file_path import IsolatedFilePathData


class CRUDFilePath(CRUDBase[FilePath]):
    def get_by_isolated_path(self, db: Session, path: IsolatedFilePathData) -> Optional[FilePath]:
        return self.query(db).filter_by(**path.unique_where()).first()

    def filter_by_isolated_path(self, db: Session, paths: List[IsolatedFilePathData]) -> List[FilePath]:
        if not paths:
            return []
        return self.query(db).filter(or_(*(path.where() for path in paths))).all()

    def list_children(self, db: Session, path: IsolatedFilePathData) -> List[FilePath]:
        children_path = path.materialized_path_for_children()
        if children_path is None:
            return []
        query = (
            self.query(db)
            .filter(FilePath.location_id == path.location_id)
            .filter(FilePath.materialized_path == children_path)
            # location 根目录自身的 materialized_path 也是 "/"
            .filter(FilePath.name != "")
        )
        return query.order_by(FilePath.is_dir.desc(), FilePath.name, FilePath.extension).all()

    def create_from_isolated_path(
        self, db: Session, path: IsolatedFilePathData, *, auto_commit: bool = True, **extra: Any
    ) -> FilePath:
        payload = {**path.unique_where(), "is_dir": path.is_dir, **extra}
        return self.create(db, payload, auto_commit=auto_commit)


file_path_crud = CRUDFilePath(FilePath)
