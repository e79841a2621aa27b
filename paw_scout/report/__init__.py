# File: paw_scout/report/__init__.py
"""paw_scout.report: renderers that turn a Report into HTML or JSON."""

from __future__ import annotations

from paw_scout.report.html_report import render_html, render_html_string
from paw_scout.report.json_report import render_json, report_to_dict
from paw_scout.report.taglines import powered_by

__all__ = ["render_html", "render_html_string", "render_json", "report_to_dict", "powered_by"]
