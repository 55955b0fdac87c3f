import os
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cv_customizer.core.config import (  # noqa: E402
    _get_env_bool,
    _get_env_float,
    _get_env_int,
    _get_env_list,
    load_settings,
)


class EnvHelperTests(unittest.TestCase):
    def test_typed_helpers_fall_back_on_bad_values(self):
        with patch.dict(os.environ, {"CVC_INT": "abc", "CVC_FLOAT": "x1", "CVC_BOOL": "yes"}):
            self.assertEqual(_get_env_int("CVC_INT", 7), 7)
            self.assertEqual(_get_env_float("CVC_FLOAT", 0.5), 0.5)
            self.assertTrue(_get_env_bool("CVC_BOOL", False))

    def test_list_helper_strips_and_drops_empty_items(self):
        with patch.dict(os.environ, {"CVC_LIST": " http://a , ,http://b "}):
            self.assertEqual(_get_env_list("CVC_LIST", ["x"]), ("http://a", "http://b"))
        with patch.dict(os.environ, {"CVC_LIST": " , "}):
            self.assertEqual(_get_env_list("CVC_LIST", ["x"]), ("x",))


class SettingsTests(unittest.TestCase):
    def test_pdf_defaults(self):
        keys = ("PDF_PAGE_WIDTH", "PDF_PAGE_HEIGHT", "PDF_MARGIN", "PDF_LINE_HEIGHT", "PDF_FONT_SIZE")
        with patch.dict(os.environ, {key: "" for key in keys}):
            cfg = load_settings()
        self.assertEqual(
            (cfg.pdf_page_width, cfg.pdf_page_height, cfg.pdf_margin, cfg.pdf_line_height, cfg.pdf_font_size),
            (210.0, 297.0, 15.0, 7.0, 10.0),
        )

    def test_overrides_from_environment(self):
        with patch.dict(os.environ, {"PDF_MARGIN": "20", "BACKEND_PORT": "8080", "RESUME_MAX_TOKENS": "2000"}):
            cfg = load_settings()
        self.assertEqual(cfg.pdf_margin, 20.0)
        self.assertEqual(cfg.backend_port, 8080)
        self.assertEqual(cfg.resume_max_tokens, 2000)


if __name__ == "__main__":
    unittest.main()
