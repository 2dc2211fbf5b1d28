"""js_scout.report: запись результатов (списки URL и JSON-сводка), используется engine и CLI."""

from __future__ import annotations

from js_scout.report.json_report import render_json
from js_scout.report.text_report import ALL_JS, BAD_JS, GOOD_JS, list_paths, render_list

__all__ = ["render_json", "render_list", "list_paths", "ALL_JS", "GOOD_JS", "BAD_JS"]
