import unittest
import shutil
from pathlib import Path
from unittest import mock

import logging

from textcompare.utils import prefs
from textcompare.utils.logger import _level_from_env
from textcompare.utils.encoding_detector import detect_file_encoding, read_text_file


class TestEncodingDetector(unittest.TestCase):
    def setUp(self):
        self.base = Path("tests/_tmp_enc")
        if self.base.exists():
            shutil.rmtree(self.base)
        self.base.mkdir(parents=True, exist_ok=True)

    def tearDown(self):
        if self.base.exists():
            shutil.rmtree(self.base)

    def test_utf8(self):
        p = self.base / "u.txt"
        p.write_bytes("ძველი ტექსტი\r\n".encode("utf-8"))
        self.assertEqual(detect_file_encoding(str(p)), "utf-8")
        # line endings are kept as-is
        self.assertEqual(read_text_file(str(p)), "ძველი ტექსტი\r\n")

    def test_legacy_encoding(self):
        p = self.base / "l.txt"
        p.write_bytes(("Le café était très déçu de la crème brûlée. " * 40).encode("latin-1"))
        self.assertNotEqual(detect_file_encoding(str(p)), "utf-8")
        self.assertIn("Le caf", read_text_file(str(p)))

    def test_missing_file_falls_back(self):
        self.assertEqual(detect_file_encoding(str(self.base / "missing.txt")), "utf-8")


class TestLogger(unittest.TestCase):
    def test_debug_flag_levels(self):
        self.assertEqual(_level_from_env("1"), logging.DEBUG)
        self.assertEqual(_level_from_env("info"), logging.INFO)
        self.assertEqual(_level_from_env(" Warning "), logging.WARNING)


class TestPrefs(unittest.TestCase):
    def setUp(self):
        self.base = Path("tests/_tmp_prefs")
        if self.base.exists():
            shutil.rmtree(self.base)
        patcher = mock.patch.object(prefs, "user_config_dir", return_value=str(self.base))
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self):
        if self.base.exists():
            shutil.rmtree(self.base)

    def test_defaults_when_missing(self):
        self.assertEqual(prefs.load_prefs(), prefs.DEFAULT_PREFS)

    def test_save_and_load(self):
        prefs.save_prefs({"format": "html"})
        loaded = prefs.load_prefs()
        self.assertEqual(loaded["format"], "html")
        self.assertTrue(loaded["highlight_spaces"])

    def test_corrupt_file_ignored(self):
        self.base.mkdir(parents=True, exist_ok=True)
        (self.base / "prefs.json").write_text("{not json", encoding="utf-8")
        self.assertEqual(prefs.load_prefs(), prefs.DEFAULT_PREFS)


if __name__ == "__main__":
    unittest.main()
