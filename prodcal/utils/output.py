"""
Сохранение календаря в JSON и вывод статистики
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from prodcal.models.calendar_data import CalendarYear
from prodcal.models.errors import CalendarDataError

logger = logging.getLogger(__name__)

STATISTICS_LABELS = (
    ('nonworking_days', 'Нерабочих дней (5-дневка)'),
    ('nonworking_days6', 'Нерабочих дней (6-дневка)'),
    ('working_days', 'Рабочие дни (выпадающие на выходные дни)'),
    ('shortened_days', 'Сокращенных дней (5-дневка)'),
    ('shortened_days6', 'Сокращенных дней (6-дневка)'),
)


def resolve_output_path(year: int, output_path: Optional[Union[str, Path]] = None) -> Path:
    """
    Определение пути к файлу календаря

    Args:
        year: Год
        output_path: Путь к файлу или каталогу (по умолчанию текущий каталог)

    Returns:
        Путь к JSON файлу
    """
    if not output_path:
        return Path(f"{year}.json")
    path = Path(output_path)
    if path.is_dir():
        return path / f"{year}.json"
    return path


def save_calendar(calendar: CalendarYear, output_path: Optional[Union[str, Path]] = None) -> Path:
    """
    Сохранение календаря в JSON файл

    Args:
        calendar: Календарь
        output_path: Путь к файлу или каталогу

    Returns:
        Путь к сохраненному файлу
    """
    path = resolve_output_path(calendar.year, output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(calendar.to_dict(), f, ensure_ascii=False, indent=4)
    logger.info(f"Календарь за {calendar.year} год сохранен в {path}")
    return path


def load_calendar(path: Union[str, Path]) -> CalendarYear:
    """Чтение календаря из JSON файла"""
    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise CalendarDataError(f"Файл {path} не является корректным JSON: {e}") from e
    if not isinstance(data, dict):
        raise CalendarDataError(f"Файл {path} не содержит объект календаря")
    return CalendarYear.from_dict(data)


def format_statistics(calendar: CalendarYear) -> str:
    """Текст статистики по календарю"""
    stats = calendar.statistics()
    lines = ["Статистика:", f"Год: {calendar.year}"]
    lines.extend(f"{label}: {stats[attr]}" for attr, label in STATISTICS_LABELS)
    return "\n".join(lines)
