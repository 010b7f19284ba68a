"""Unit tests for library configuration."""

from pathlib import Path
from unittest.mock import patch

from mdwiki.config import DEFAULT_MARKDOWN_EXTENSIONS, Settings


class TestSettings:
    def test_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings()
            assert s.data_dir == Path("data/pages")
            assert s.encoding == "utf-8"
            assert s.markdown_extensions == DEFAULT_MARKDOWN_EXTENSIONS

    def test_from_env(self):
        env = {
            "MDWIKI_DATA_DIR": "/tmp/wiki",
            "MDWIKI_ENCODING": "latin-1",
            "MDWIKI_MARKDOWN_EXTENSIONS": '["extra"]',
        }
        with patch.dict("os.environ", env, clear=True):
            s = Settings()
            assert s.data_dir == Path("/tmp/wiki")
            assert s.encoding == "latin-1"
            assert s.markdown_extensions == ["extra"]

    def test_default_extensions_not_shared(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings()
            s.markdown_extensions.append("nl2br")
            assert "nl2br" not in DEFAULT_MARKDOWN_EXTENSIONS
