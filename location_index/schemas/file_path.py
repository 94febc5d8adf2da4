"""路径键的序列化模型。"""

from pydantic import BaseModel, ConfigDict, Field


class IsolatedFilePathSchema(BaseModel):
    model_config = ConfigDict(frozen=True, from_attributes=True)

    location_id: int
    materialized_path: str = Field(..., min_length=1, pattern=r"^/(.*/)?$")
    is_dir: bool
    name: str = ""
    extension: str = ""
    # 派生字段，反序列化时按其余字段重新计算
    relative_path: str = ""
