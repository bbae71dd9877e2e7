from pathlib import PurePosixPath, PureWindowsPath

import pytest

from pathfinder.platforms import CURRENT_PLATFORM, Platform, detect_platform


def test_detect_platform_from_sys_platform():
    assert detect_platform("win32") is Platform.WINDOWS
    assert detect_platform("cygwin") is Platform.WINDOWS
    assert detect_platform("darwin") is Platform.MACOS
    assert detect_platform("linux") is Platform.LINUX
    assert detect_platform("freebsd13") is Platform.LINUX
    assert isinstance(CURRENT_PLATFORM, Platform)


def test_platform_parse_accepts_aliases():
    assert Platform.parse("Windows") is Platform.WINDOWS
    assert Platform.parse("darwin") is Platform.MACOS
    assert Platform.parse(" linux ") is Platform.LINUX
    assert Platform.parse(Platform.MACOS) is Platform.MACOS
    with pytest.raises(ValueError, match="Unknown platform"):
        Platform.parse("amiga")


def test_platform_path_conventions():
    assert Platform.WINDOWS.executable_suffix == ".exe"
    assert Platform.MACOS.executable_suffix == ""
    assert Platform.WINDOWS.pure_path is PureWindowsPath
    assert Platform.LINUX.pure_path is PurePosixPath
