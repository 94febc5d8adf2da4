"""模型包初始化，便于统一导入 ORM 实体并触发模型注册。"""

from location_index.models.file_path import FilePath
from location_index.models.location import Location

__all__ = [
    "FilePath",
    "Location",
]
