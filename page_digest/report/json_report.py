# page_digest/report/json_report.py

"""
Генерация JSON-отчёта для проекта PageDigest.

Сериализация объекта DigestReport в файл.
"""
from pathlib import Path

from page_digest.aggregator import DigestReport


def render_json(report: DigestReport, output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Сохраняет отчёт report в формате JSON по указанному пути.

    :param report: объект DigestReport с результатами
    :param output_path: путь к JSON-файлу
    :param pretty: отступ 2 пробела
    :return: Path сохранённого файла
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(report.json(pretty=pretty), encoding="utf-8")
    return output
