"""Tests for Quelea utility functions."""

import logging

import pytest

from quelea.utils import (
    get_quelea_user_home,
    native_style_name,
    quelea_user_home_path,
    setup_logging,
)
from quelea.utils.logger import get_log_dir

# Guard: skip Qt-dependent tests if PySide6 is not importable
try:
    from PySide6.QtWidgets import QStyleFactory
    _HAS_QT = True
except ImportError:
    _HAS_QT = False

needs_qt = pytest.mark.skipif(not _HAS_QT, reason="PySide6 not available")


@pytest.fixture
def root_logger():
    """Restore root logger handlers and level after the test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestQueleaUserHome:
    """Tests for the per-user data directory."""

    def test_creates_directory(self, tmp_path):
        home = get_quelea_user_home(tmp_path)
        assert home == tmp_path / ".quelea"
        assert home.is_dir()

    def test_existing_directory(self, tmp_path):
        (tmp_path / ".quelea").mkdir()
        assert get_quelea_user_home(str(tmp_path)) == tmp_path / ".quelea"

    def test_path_lookup_does_not_create(self, tmp_path):
        assert quelea_user_home_path(tmp_path) == tmp_path / ".quelea"
        assert not (tmp_path / ".quelea").exists()

    def test_defaults_to_user_home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert get_quelea_user_home() == tmp_path / ".quelea"


class TestSetupLogging:
    """Tests for logging configuration."""

    def test_console_only(self, root_logger, tmp_path):
        logger = setup_logging(log_level="DEBUG", log_file=False, user_home=tmp_path)

        assert logger is root_logger
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert not (tmp_path / ".quelea" / "logs").exists()

    def test_file_handler(self, root_logger, tmp_path):
        logger = setup_logging(log_level="INFO", log_file=True, user_home=tmp_path)

        file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        log_files = list(get_log_dir(tmp_path).glob("quelea_*.log"))
        assert len(log_files) == 1

    def test_unknown_level_falls_back_to_info(self, root_logger, tmp_path):
        logger = setup_logging(log_level="chatty", log_file=False)
        assert logger.level == logging.INFO


class TestNativeStyleName:
    """Tests for the "System" look and feel lookup."""

    def test_windows_prefers_newest(self, monkeypatch):
        monkeypatch.setattr("quelea.utils.styles.sys.platform", "win32")
        assert native_style_name(["Windows", "windowsvista", "Fusion"]) == "windowsvista"

    def test_macos(self, monkeypatch):
        monkeypatch.setattr("quelea.utils.styles.sys.platform", "darwin")
        assert native_style_name(["macOS", "Fusion"]) == "macOS"

    def test_linux_falls_back_to_fusion(self, monkeypatch):
        monkeypatch.setattr("quelea.utils.styles.sys.platform", "linux")
        assert native_style_name(["Windows", "Fusion"]) == "Fusion"

    def test_native_style_missing(self, monkeypatch):
        monkeypatch.setattr("quelea.utils.styles.sys.platform", "win32")
        assert native_style_name(["Fusion"]) == "Fusion"

    @needs_qt
    def test_uses_installed_styles(self):
        assert isinstance(native_style_name(), str)
