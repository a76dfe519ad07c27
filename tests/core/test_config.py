"""Tests for configuration module."""

import pytest

from pdf_pages.core.config import ExportConfig


class TestExportConfig:
    """Tests for ExportConfig class."""

    def test_default_values(self):
        """Config should have sensible defaults."""
        config = ExportConfig()

        assert config.dedupe is False
        assert config.output_suffix == "_pages"
        assert config.garbage == 3
        assert config.deflate is True
        assert config.clean is False
        assert config.verbose is True

    def test_custom_values(self):
        """Config should accept custom values."""
        config = ExportConfig(dedupe=True, output_suffix="_excerpt", verbose=False)

        assert config.dedupe is True
        assert config.output_suffix == "_excerpt"
        assert config.verbose is False

    @pytest.mark.parametrize("garbage", [-1, 5])
    def test_invalid_garbage(self, garbage):
        """Garbage levels outside 0-4 should be rejected."""
        with pytest.raises(ValueError):
            ExportConfig(garbage=garbage)

    def test_save_options(self):
        """save_options() should hold the PyMuPDF save keywords."""
        config = ExportConfig(garbage=2, deflate=False, clean=True)

        assert config.save_options() == {
            "garbage": 2,
            "deflate": False,
            "clean": True,
        }

    def test_compact(self):
        """Compact preset should maximize cleanup."""
        config = ExportConfig.compact()

        assert config.garbage == 4
        assert config.deflate is True
        assert config.clean is True

    def test_fast(self):
        """Fast preset should skip compression and cleanup."""
        config = ExportConfig.fast()

        assert config.garbage == 0
        assert config.deflate is False
        assert config.clean is False


class TestExportConfigFromEnvironment:
    """Tests for reading config from environment variables."""

    def test_no_variables(self, monkeypatch):
        """Without variables the defaults should apply."""
        for name in ("DEDUPE", "DEFLATE", "GARBAGE", "OUTPUT_SUFFIX"):
            monkeypatch.delenv(f"PDF_PAGES_{name}", raising=False)

        assert ExportConfig.from_environment() == ExportConfig()

    def test_reads_variables(self, monkeypatch):
        """Each variable should override its field."""
        monkeypatch.setenv("PDF_PAGES_DEDUPE", "yes")
        monkeypatch.setenv("PDF_PAGES_DEFLATE", "0")
        monkeypatch.setenv("PDF_PAGES_GARBAGE", "1")
        monkeypatch.setenv("PDF_PAGES_OUTPUT_SUFFIX", "_cut")

        config = ExportConfig.from_environment()

        assert config.dedupe is True
        assert config.deflate is False
        assert config.garbage == 1
        assert config.output_suffix == "_cut"

    def test_invalid_garbage_variable(self, monkeypatch):
        """Out-of-range garbage from the environment should be rejected."""
        monkeypatch.setenv("PDF_PAGES_GARBAGE", "9")

        with pytest.raises(ValueError):
            ExportConfig.from_environment()
