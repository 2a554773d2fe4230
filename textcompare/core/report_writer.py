# textcompare/core/report_writer.py

from __future__ import annotations

import os
import tempfile

from textcompare.config import (
    ADDED_CLASS, ADDED_COLOR, BLOCK_CLASS, REMOVED_CLASS, REMOVED_COLOR, REPORT_TITLE,
)
from textcompare.core.annotator import html_escape
from textcompare.core.diff_engine import DiffResult
from textcompare.utils.logger import logger

_PAGE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
  body {{ font-family: system-ui, sans-serif; margin: 24px; background: #fff; color: #000; }}
  .panes {{ display: flex; gap: 24px; }}
  .pane {{ flex: 1; min-width: 0; }}
  .pane h2 {{ font-size: 14px; font-weight: 600; margin: 0 0 8px; }}
  .text {{ border: 1px solid #ccc; border-radius: 6px; padding: 16px;
           white-space: pre-wrap; word-wrap: break-word; }}
  .{removed_class} {{ color: {removed_color}; }}
  .{added_class} {{ color: {added_color}; }}
  .{block_class} {{ color: transparent; }}
</style>
</head>
<body>
<h1>{title}</h1>
<div class="panes">
  <div class="pane"><h2>{old_label}</h2><div class="text">{old_html}</div></div>
  <div class="pane"><h2>{new_label}</h2><div class="text">{new_html}</div></div>
</div>
</body>
</html>
"""


class ReportWriter:
    """Writes a two-pane HTML page for a result computed with the 'html' markup."""

    def __init__(self, title: str = REPORT_TITLE):
        self.title = title

    def render(self, result: DiffResult, old_label: str = "Old", new_label: str = "New") -> str:
        return _PAGE.format(
            title=html_escape(self.title),
            removed_class=REMOVED_CLASS,
            added_class=ADDED_CLASS,
            block_class=BLOCK_CLASS,
            removed_color=REMOVED_COLOR,
            added_color=ADDED_COLOR,
            old_label=html_escape(old_label),
            new_label=html_escape(new_label),
            old_html=result.old_annotated,
            new_html=result.new_annotated,
        )

    def write(self, result: DiffResult, output_path: str, old_label: str = "Old", new_label: str = "New") -> bool:
        """Write the report atomically (tmp -> replace). Returns False on failure."""
        tmp_dir = os.path.dirname(output_path) or "."
        tmp_path = None
        try:
            page = self.render(result, old_label, new_label)
            with tempfile.NamedTemporaryFile("w", encoding="utf-8", delete=False, dir=tmp_dir,
                                             suffix=".tmp") as tmp:
                tmp_path = tmp.name
                tmp.write(page)

            # Atomic replace
            os.replace(tmp_path, output_path)
            logger.info(f"Report written to {output_path}")
            return True

        except OSError as e:
            logger.error(f"Failed to write report: {str(e)}")
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            return False
