import logging
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock
import sys

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "md2html" / "src"
sys.path.insert(0, str(SRC))

from md2html import config
from md2html.errors import InputNotFoundError, format_error
from md2html.models.assets import TemplateAssets


class TestConfig(unittest.TestCase):
    def test_log_level(self):
        with mock.patch.dict(os.environ, {"MD2HTML_LOG_LEVEL": "debug"}):
            self.assertEqual(config.get_log_level(), logging.DEBUG)
        with mock.patch.dict(os.environ, {"MD2HTML_LOG_LEVEL": "chatty"}):
            self.assertEqual(config.get_log_level(), logging.WARNING)
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(config.get_log_level(), logging.WARNING)

    def test_assets_defaults_and_overrides(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(config.get_assets(), TemplateAssets())
        with mock.patch.dict(os.environ, {"MD2HTML_MARKDOWN_CSS_DARK": " https://example.com/dark.css "}, clear=True):
            assets = config.get_assets()
            self.assertEqual(assets.markdown_css_dark, "https://example.com/dark.css")
            self.assertEqual(assets.markdown_css_light, TemplateAssets().markdown_css_light)

    def test_env_file_does_not_override(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            env_path = Path(tmpdir) / ".env"
            env_path.write_text("# comment\nMD2HTML_A=from_file\nMD2HTML_B = two\n")
            with mock.patch.dict(os.environ, {"MD2HTML_A": "already"}, clear=True):
                config.load_env_file(str(env_path))
                self.assertEqual(os.environ["MD2HTML_A"], "already")
                self.assertEqual(os.environ["MD2HTML_B"], "two")


class TestErrors(unittest.TestCase):
    def test_format_error_envelope(self):
        import json
        payload = json.loads(format_error(InputNotFoundError("x.md")))
        self.assertFalse(payload["ok"])
        self.assertEqual(payload["error"]["type"], "InputNotFoundError")
        self.assertEqual(payload["error"]["details"], {"path": "x.md"})

    def test_format_unknown_error(self):
        import json
        try:
            raise RuntimeError("boom")
        except RuntimeError as e:
            payload = json.loads(format_error(e))
        self.assertEqual(payload["error"]["type"], "UnknownError")
        self.assertEqual(payload["error"]["message"], "boom")


if __name__ == "__main__":
    unittest.main()
