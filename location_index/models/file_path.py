"""文件路径记录模型（文件与目录合并）。

存储规则：
- materialized_path：父目录路径，以 '/' 开头并以 '/' 结尾；根目录下条目为 '/'；
- name：不含扩展名的名称；location 根目录自身为空串；
- extension：小写、不含点；目录恒为空串；
- 各键字段允许为 NULL（历史数据或部分写入），还原为路径键时需逐项校验。
"""

from typing import Optional

from sqlalchemy import BigInteger, Boolean, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from location_index.core.constants import (
    MAX_EXTENSION_LENGTH,
    MAX_MATERIALIZED_PATH_LENGTH,
    MAX_NAME_LENGTH,
)
from location_index.models.base import Base, TimestampMixin


class FilePath(TimestampMixin, Base):
    __tablename__ = "file_paths"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    location_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("locations.id"), nullable=True, index=True
    )
    materialized_path: Mapped[Optional[str]] = mapped_column(
        String(MAX_MATERIALIZED_PATH_LENGTH), nullable=True, index=True
    )
    name: Mapped[Optional[str]] = mapped_column(String(MAX_NAME_LENGTH), nullable=True)
    extension: Mapped[Optional[str]] = mapped_column(String(MAX_EXTENSION_LENGTH), nullable=True)
    is_dir: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    size_bytes: Mapped[int] = mapped_column(BigInteger, default=0)

    __table_args__ = (
        UniqueConstraint(
            "location_id",
            "materialized_path",
            "name",
            "extension",
            name="uq_file_paths_location_materialized_path_name_extension",
        ),
    )
