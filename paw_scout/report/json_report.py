# paw_scout/report/json_report.py

"""
Генерация JSON-отчёта для проекта PawScout.

Сериализация объекта Report в файл.
"""
import json
from pathlib import Path
from typing import Any, Dict

from paw_scout.aggregator import Report


def report_to_dict(report: Report) -> Dict[str, Any]:
    """Plain-data view of *report*, links index-aligned with ``sites``."""
    return {
        "generated": report.generated_label,
        "generated_at": report.generated.isoformat(timespec="seconds"),
        "sites": list(report.sites),
        "site_urls": dict(report.site_urls),
        "pets": [
            {
                "id": entry.pet_id,
                "links": list(entry.links),
                "presence_count": entry.presence_count,
            }
            for entry in report.pets
        ],
        "failures": dict(report.failures),
    }


def render_json(report: Report, output_path: Path | str, pretty: bool = True) -> Path:
    """
    Сохраняет отчёт report в формате JSON по указанному пути.

    :param report: объект Report с результатами обхода
    :param output_path: путь к JSON-файлу
    :param pretty: отступ 2 вместо компактной записи
    :return: Path сохранённого файла
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(report_to_dict(report), f, ensure_ascii=False, indent=2 if pretty else None)

    return output
