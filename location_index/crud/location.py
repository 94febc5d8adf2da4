"""Location CRUD。"""

from __future__ import annotations

from sqlalchemy.orm import Session

from location_index.crud.base import CRUDBase
from location_index.models.location import Location


class CRUDLocation(CRUDBase[Location]):
    def get_by_path(self, db: Session, *, path: str) -> Location | None:
        return self.query(db).filter(Location.path == path).first()


location_crud = CRUDLocation(Location)
