import unittest
import shutil
from pathlib import Path

from textcompare.core.diff_engine import compute_diff
from textcompare.core.report_writer import ReportWriter


class TestReportWriter(unittest.TestCase):
    def setUp(self):
        self.base = Path("tests/_tmp_report")
        if self.base.exists():
            shutil.rmtree(self.base)
        self.base.mkdir(parents=True, exist_ok=True)

    def tearDown(self):
        if self.base.exists():
            shutil.rmtree(self.base)

    def test_write_report(self):
        result = compute_diff("go now", "go later")
        out = self.base / "report.html"
        ok = ReportWriter().write(result, str(out), old_label="a<b>.txt", new_label="new.txt")
        self.assertTrue(ok)
        page = out.read_text(encoding="utf-8")
        self.assertIn(result.old_annotated, page)
        self.assertIn(result.new_annotated, page)
        self.assertIn("a&lt;b&gt;.txt", page)
        self.assertIn(".diff-del", page)
        # no temp files left behind
        self.assertEqual([p.name for p in self.base.iterdir()], ["report.html"])

    def test_write_into_missing_folder_fails(self):
        result = compute_diff("a", "b")
        ok = ReportWriter().write(result, str(self.base / "missing" / "report.html"))
        self.assertFalse(ok)


if __name__ == "__main__":
    unittest.main()
