"""文件名校验：按平台策略拒绝非法文件名。

- windows：保留设备名（CON/PRN/AUX/NUL/COM1-9/LPT1-9，可带 .扩展名）
  以及 ``< > : " / \\ | ? *`` 与控制字符 ``\\x00-\\x1f``；
- windows_legacy：同上，但字符区间保留历史写法 ``\\u0000-\\u0031``；
- posix：仅拒绝 ``/`` 与 NUL。

正则集合在首次使用时编译一次，由校验器实例持有。
"""

from __future__ import annotations

import os
import re
import threading
from functools import lru_cache
from typing import List, Optional, Pattern

from location_index.core.config import get_settings
from location_index.core.logger import logger

WINDOWS_POLICY = "windows"
WINDOWS_LEGACY_POLICY = "windows_legacy"
POSIX_POLICY = "posix"
AUTO_POLICY = "auto"

_WINDOWS_RESERVED_NAMES = r"(?i)^(CON|PRN|AUX|NUL|COM[1-9]|LPT[1-9])(\.\w+)*$"

_FORBIDDEN_PATTERNS = {
    WINDOWS_POLICY: (
        _WINDOWS_RESERVED_NAMES,
        r'[<>:"/\\|?*\x00-\x1f]',
    ),
    # 1 is '1': this range also rejects space, '.', digits 0-1 and most
    # punctuation, so nearly every name with an extension fails. Opt-in only.
    WINDOWS_LEGACY_POLICY: (
        _WINDOWS_RESERVED_NAMES,
        r'[<>:"/\\|?*\u0000-1]',
    ),
    POSIX_POLICY: (r"/|\x00",),
}


def resolve_policy(policy: Optional[str] = None) -> str:
    """把 ``auto``/``None`` 解析为当前宿主系统对应的具体策略。"""
    policy = (policy or AUTO_POLICY).strip().lower()
    if policy == AUTO_POLICY:
        return WINDOWS_POLICY if os.name == "nt" else POSIX_POLICY
    if policy not in _FORBIDDEN_PATTERNS:
        available = ", ".join([AUTO_POLICY, *_FORBIDDEN_PATTERNS])
        raise ValueError(f"unknown filename policy '{policy}', available: {available}")
    return policy


class FilenameValidator:
    """持有一次性初始化的正则集合；并发首次调用只会编译一次。"""

    def __init__(self, policy: Optional[str] = None) -> None:
        self.policy = resolve_policy(policy)
        self._patterns: Optional[List[Pattern[str]]] = None
        self._lock = threading.Lock()
        self.compile_count = 0

    @property
    def patterns(self) -> List[Pattern[str]]:
        patterns = self._patterns
        if patterns is not None:
            return patterns
        with self._lock:
            if self._patterns is None:
                compiled = [re.compile(raw) for raw in _FORBIDDEN_PATTERNS[self.policy]]
                self.compile_count += 1
                logger.debug("Compiled %d forbidden filename patterns for policy %s", len(compiled), self.policy)
                # 完整构建后再发布，其他线程不会看到半成品
                self._patterns = compiled
            return self._patterns

    def accept(self, name: str) -> bool:
        return not any(pattern.search(name) for pattern in self.patterns)


@lru_cache
def get_filename_validator() -> FilenameValidator:
    """返回进程级默认校验器，策略取自 ``FILENAME_POLICY`` 配置。"""
    return FilenameValidator(get_settings().filename_policy)


def accept_file_name(name: str) -> bool:
    return get_filename_validator().accept(name)


__all__ = [
    "WINDOWS_POLICY",
    "WINDOWS_LEGACY_POLICY",
    "POSIX_POLICY",
    "AUTO_POLICY",
    "FilenameValidator",
    "resolve_policy",
    "get_filename_validator",
    "accept_file_name",
]
