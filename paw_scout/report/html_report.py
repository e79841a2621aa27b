# File: paw_scout/report/html_report.py
"""paw_scout.report.html_report: Генерация HTML-отчёта с помощью Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from paw_scout.aggregator import Report

TEMPLATE_NAME = "report.html.j2"
DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


def _environment(template_dir: Union[Path, str, None]) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(template_dir or DEFAULT_TEMPLATE_DIR)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_html_string(
    report: Report,
    template_dir: Union[Path, str, None] = None,
    powered_by: Optional[str] = None,
) -> str:
    """Render *report* through ``report.html.j2`` and return the markup."""
    template = _environment(template_dir).get_template(TEMPLATE_NAME)
    context: dict[str, Any] = {
        "generated": report.generated_label,
        "sites": [(label, report.site_urls.get(label, "")) for label in report.sites],
        "pets": report.pets,
        "failures": report.failures,
        "powered_by": powered_by,
    }
    return template.render(**context)


def render_html(
    report: Report,
    template_dir: Union[Path, str, None],
    output_path: Union[Path, str],
    powered_by: Optional[str] = None,
) -> Path:
    """Рендерит HTML-отчёт из шаблона и сохраняет его по указанному пути.

    Args:
        report: объект Report.
        template_dir: директория с Jinja2-шаблонами (None: встроенный шаблон).
        output_path: путь к итоговому HTML-файлу.
        powered_by: декоративная подпись внизу страницы.

    Returns:
        Path до сохранённого HTML-файла.

    Пример:
    ```python
    from paw_scout.report.html_report import render_html
    html_path = render_html(report, template_dir=None, output_path='public/index.html')
    ```
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    html_content = render_html_string(report, template_dir, powered_by)
    # write next to the target and swap, so a reader never sees a half-written page
    tmp_path = output_path.with_name(output_path.name + ".new")
    tmp_path.write_text(html_content, encoding="utf-8")
    tmp_path.replace(output_path)
    return output_path
