"""数据库初始化：按模型元数据建表。"""

from location_index.core.logger import logger
from location_index.db import session as db_session
from location_index.models import FilePath, Location  # noqa: F401  触发模型注册
from location_index.models.base import Base


def init_db() -> None:
    """创建缺失的表；已存在的表保持不变。"""
    Base.metadata.create_all(bind=db_session.engine)
    logger.info("Database tables ready: %s", ", ".join(sorted(Base.metadata.tables)))
