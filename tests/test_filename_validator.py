"""文件名校验策略测试。"""

import threading

import pytest

from location_index.utils import filename_validator as fv
from location_index.utils.filename_validator import FilenameValidator, resolve_policy


@pytest.mark.parametrize(
    "name, accepted",
    [
        ("report.txt", True),
        ("photo 2024.jpeg", True),
        (".gitignore", True),
        ("CON.txt", False),
        ("con", False),
        ("Lpt9.tar.gz", False),
        ("COM0", True),
        ("CONSOLE.txt", True),
        ("a<b", False),
        ("a:b", False),
        ('quote"d', False),
        ("pipe|d", False),
        ("what?", False),
        ("star*", False),
        ("back\\slash", False),
        ("slash/ed", False),
        ("tab\tname", False),
        ("nul\x00name", False),
    ],
)
def test_windows_policy(name, accepted):
    assert FilenameValidator(fv.WINDOWS_POLICY).accept(name) is accepted


@pytest.mark.parametrize(
    "name, accepted",
    [
        ("report.txt", True),
        ("CON.txt", True),
        ("a:b?c*", True),
        ("back\\slash", True),
        ("slash/ed", False),
        ("nul\x00name", False),
    ],
)
def test_posix_policy(name, accepted):
    assert FilenameValidator(fv.POSIX_POLICY).accept(name) is accepted


def test_legacy_windows_range_rejects_up_to_ascii_one():
    validator = FilenameValidator(fv.WINDOWS_LEGACY_POLICY)
    assert validator.accept("CON.txt") is False
    # '.', ' ', '0' and '1' all sit inside \u0000-1
    assert validator.accept("report.txt") is False
    assert validator.accept("a b") is False
    assert validator.accept("v1") is False
    assert validator.accept("v2") is True


def test_auto_policy_follows_host(monkeypatch):
    monkeypatch.setattr(fv.os, "name", "nt")
    assert resolve_policy("auto") == fv.WINDOWS_POLICY
    monkeypatch.setattr(fv.os, "name", "posix")
    assert resolve_policy(None) == fv.POSIX_POLICY


def test_unknown_policy_is_rejected():
    with pytest.raises(ValueError):
        FilenameValidator("dos")


def test_patterns_compile_once_under_concurrency():
    validator = FilenameValidator(fv.WINDOWS_POLICY)
    barrier = threading.Barrier(16)
    results = []

    def worker():
        barrier.wait()
        results.append(validator.accept("CON.txt"))

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results == [False] * 16
    assert validator.compile_count == 1
    assert validator.patterns is validator.patterns


def test_default_validator_uses_settings(monkeypatch):
    from location_index.core.config import get_settings

    monkeypatch.setenv("FILENAME_POLICY", "windows")
    get_settings.cache_clear()
    fv.get_filename_validator.cache_clear()
    try:
        assert fv.get_filename_validator().policy == fv.WINDOWS_POLICY
        assert fv.accept_file_name("CON.txt") is False
        assert fv.accept_file_name("report.txt") is True
    finally:
        get_settings.cache_clear()
        fv.get_filename_validator.cache_clear()
