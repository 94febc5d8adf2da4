"""全局常量定义。"""

ROOT_MATERIALIZED_PATH = "/"

# 存储记录字段名前缀，用于 MissingFieldError 中标识缺失字段
FILE_PATH_FIELD_PREFIX = "file_path"

# 与 FilePath 表列宽保持一致
MAX_MATERIALIZED_PATH_LENGTH = 1024
MAX_NAME_LENGTH = 255
MAX_EXTENSION_LENGTH = 64
