"""location_index：为 location 内的文件与目录计算平台无关的隔离路径键。"""

from .core.config import get_settings
from .core.exceptions import (
    BackslashInPathError,
    CorruptedFilePathError,
    FilePathError,
    ForbiddenFileNameError,
    InvalidFilenameAndExtensionError,
    LocationNotFoundError,
    MissingFieldError,
    NonUtf8PathError,
    UnableToExtractMaterializedPathError,
)
from .core.logger import logger, setup_logging
from .services.isolated_file_path import IsolatedFilePathData
from .services.record_adapter import from_location_and_record, from_record
from .utils.filename_validator import FilenameValidator, accept_file_name

__all__ = [
    "IsolatedFilePathData",
    "FilenameValidator",
    "accept_file_name",
    "from_record",
    "from_location_and_record",
    "FilePathError",
    "UnableToExtractMaterializedPathError",
    "NonUtf8PathError",
    "InvalidFilenameAndExtensionError",
    "BackslashInPathError",
    "ForbiddenFileNameError",
    "MissingFieldError",
    "LocationNotFoundError",
    "CorruptedFilePathError",
    "get_settings",
    "setup_logging",
    "logger",
]
