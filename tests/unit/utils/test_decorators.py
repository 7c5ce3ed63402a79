"""Unit tests for utility decorators and package checks."""

import logging

import pytest

from markdiff.exceptions import DependencyError
from markdiff.utils.decorators import debug_timer, requires_dependencies
from markdiff.utils.packages import installed_version, satisfies


@pytest.mark.unit
class TestRequiresDependencies:
    """Tests for the requires_dependencies decorator."""

    def test_missing_package(self):
        """Test a missing package raises DependencyError before the call."""
        calls = []

        @requires_dependencies("fake", [("markdiff-missing-pkg", "markdiff_missing_pkg", "")])
        def run():
            calls.append(True)

        with pytest.raises(DependencyError) as exc_info:
            run()
        assert exc_info.value.missing_packages == [("markdiff-missing-pkg", "")]
        assert isinstance(exc_info.value.original_import_error, ImportError)
        assert calls == []

    def test_version_mismatch(self):
        """Test an unsatisfiable version constraint is reported."""

        @requires_dependencies("fake", [("pytest", "pytest", ">=9999")])
        def run():
            return "ran"

        with pytest.raises(DependencyError) as exc_info:
            run()
        assert exc_info.value.version_mismatches[0][:2] == ("pytest", ">=9999")
        assert exc_info.value.extra == "fake"

    def test_satisfied(self):
        """Test the wrapped function runs when dependencies are present."""

        @requires_dependencies("fake", [("pytest", "pytest", ">=1.0")])
        def run():
            return "ran"

        assert run() == "ran"


@pytest.mark.unit
class TestPackages:
    """Tests for package version helpers."""

    def test_missing_package_version(self):
        """Test unknown distributions have no version and satisfy nothing."""
        assert installed_version("markdiff-missing-pkg") is None
        assert not satisfies("markdiff-missing-pkg", ">=1")

    def test_installed_package(self):
        """Test installed distributions report their version."""
        assert installed_version("pytest") is not None
        assert satisfies("pytest", ">=1.0")
        assert not satisfies("pytest", ">=9999")

@pytest.mark.unit
class TestDebugTimer:
    """Tests for the debug_timer context manager."""

    def test_logs_at_debug(self, caplog):
        """Test elapsed time is logged when DEBUG is enabled."""
        logger = logging.getLogger("markdiff.test")
        with caplog.at_level(logging.DEBUG, logger="markdiff.test"):
            with debug_timer(logger, "Work"):
                pass
        assert "Work completed in" in caplog.text

    def test_silent_above_debug(self, caplog):
        """Test nothing is logged when DEBUG is disabled."""
        logger = logging.getLogger("markdiff.test")
        with caplog.at_level(logging.INFO, logger="markdiff.test"):
            with debug_timer(logger, "Work"):
                pass
        assert "Work completed in" not in caplog.text
