"""Location 模型：被索引的文件系统根目录。"""

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from location_index.models.base import Base, TimestampMixin


class Location(TimestampMixin, Base):
    """已注册的根目录；``path`` 为宿主系统上的绝对路径，原样保存。"""

    __tablename__ = "locations"
    __table_args__ = (
        UniqueConstraint("path", name="uq_locations_path"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255))
    path: Mapped[str] = mapped_column(String(1024))
