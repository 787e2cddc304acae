"""Tests for procpick.platform.detection module."""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import patch

import pytest

from procpick.platform.detection import (
    Platform,
    PlatformInfo,
    detect,
    detect_platform,
)


class TestPlatformEnum:
    """Test Platform enum properties."""

    def test_str(self) -> None:
        assert str(Platform.LINUX) == "linux"
        assert str(Platform.MACOS) == "macos"
        assert str(Platform.WINDOWS) == "windows"
        assert str(Platform.UNKNOWN) == "unknown"


class TestPlatformInfo:
    """Test PlatformInfo dataclass."""

    def test_frozen(self) -> None:
        info = PlatformInfo(Platform.LINUX, "linux")
        with pytest.raises(AttributeError):
            info.platform = Platform.WINDOWS  # type: ignore[misc]

    def test_name_of_known_platform(self) -> None:
        assert PlatformInfo(Platform.MACOS, "darwin").name == "macos"

    def test_name_of_unknown_platform_is_raw_system(self) -> None:
        info = PlatformInfo(Platform.UNKNOWN, "freebsd14")
        assert info.name == "freebsd14"
        assert str(info) == "freebsd14"


class TestPlatformDetection:
    """Test platform detection with mocking."""

    @pytest.fixture(autouse=True)
    def _clear_caches(self) -> Iterator[None]:
        detect_platform.cache_clear()
        detect.cache_clear()
        yield
        detect_platform.cache_clear()
        detect.cache_clear()

    @pytest.mark.parametrize(
        ("system", "expected"),
        [
            ("linux", Platform.LINUX),
            ("darwin", Platform.MACOS),
            ("win32", Platform.WINDOWS),
            ("cygwin", Platform.WINDOWS),
            ("msys", Platform.WINDOWS),
            ("freebsd14", Platform.UNKNOWN),
            ("aix", Platform.UNKNOWN),
        ],
    )
    def test_detect_platform(self, system: str, expected: Platform) -> None:
        with patch("sys.platform", system):
            assert detect_platform() == expected

    def test_detect_keeps_raw_system(self) -> None:
        with patch("sys.platform", "sunos5"):
            info = detect()
        assert info == PlatformInfo(Platform.UNKNOWN, "sunos5")
