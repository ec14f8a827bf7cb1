"""
Модель данных производственного календаря
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Iterable, List, Tuple

from prodcal.models.errors import CalendarDataError, InvalidDayCode


class DayCode(IntEnum):
    """Код типа дня (значения совпадают с цифрами ответа isdayoff.ru)"""

    ORDINARY_WORKING = 0
    ORDINARY_NONWORKING = 1
    SHORTENED = 2
    FORCED_WORKING = 4

    @classmethod
    def parse(cls, value) -> 'DayCode':
        """
        Преобразование сырого значения в код дня

        Args:
            value: DayCode, целое число или строка из одной цифры

        Returns:
            Код дня

        Raises:
            InvalidDayCode: Значение вне допустимого набора
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise InvalidDayCode(f"Недопустимый код дня: {value!r}")
        if isinstance(value, str):
            value = value.strip()
            if len(value) != 1 or not value.isdigit():
                raise InvalidDayCode(f"Недопустимый код дня: {value!r}")
            value = int(value)
        if not isinstance(value, int):
            raise InvalidDayCode(f"Недопустимый код дня: {value!r}")
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidDayCode(f"Недопустимый код дня: {value!r}") from e


# Ключи JSON в порядке вывода -> имя поля
JSON_FIELDS = (
    ('NonworkingDays', 'nonworking_days'),
    ('NonworkingDays6', 'nonworking_days6'),
    ('WorkingDays', 'working_days'),
    ('ShortenedDays', 'shortened_days'),
    ('ShortenedDays6', 'shortened_days6'),
)


def _sorted_days(days: Iterable[str]) -> Tuple[str, ...]:
    return tuple(sorted(set(days)))


@dataclass(frozen=True)
class CalendarYear:
    """
    Производственный календарь за год.

    Все списки содержат даты в формате MMDD, уникальные и отсортированные
    по возрастанию. Обычные рабочие дни в списки не попадают.
    """

    year: int
    nonworking_days: Tuple[str, ...] = field(default_factory=tuple)
    nonworking_days6: Tuple[str, ...] = field(default_factory=tuple)
    working_days: Tuple[str, ...] = field(default_factory=tuple)
    shortened_days: Tuple[str, ...] = field(default_factory=tuple)
    shortened_days6: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Нормализуем любые итерируемые значения к отсортированным кортежам
        for _, attr in JSON_FIELDS:
            object.__setattr__(self, attr, _sorted_days(getattr(self, attr)))

    @classmethod
    def empty(cls, year: int) -> 'CalendarYear':
        """Календарь без особых дней"""
        return cls(year=year)

    def to_dict(self) -> Dict[str, object]:
        """
        Представление календаря для сериализации в JSON

        Returns:
            Словарь с ключами Year, NonworkingDays, NonworkingDays6,
            WorkingDays, ShortenedDays, ShortenedDays6
        """
        data: Dict[str, object] = {'Year': self.year}
        for key, attr in JSON_FIELDS:
            data[key] = list(getattr(self, attr))
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'CalendarYear':
        """
        Восстановление календаря из словаря, полученного через to_dict

        Args:
            data: Словарь с данными календаря

        Returns:
            Объект CalendarYear
        """
        if 'Year' not in data:
            raise CalendarDataError("В данных календаря отсутствует ключ 'Year'")
        try:
            year = int(data['Year'])
        except (TypeError, ValueError) as e:
            raise CalendarDataError(f"Некорректный год: {data['Year']!r}") from e

        values: Dict[str, List[str]] = {}
        for key, attr in JSON_FIELDS:
            days = data.get(key) or []
            if not isinstance(days, list) or not all(
                    isinstance(d, str) and len(d) == 4 and d.isdigit() for d in days):
                raise CalendarDataError(f"Некорректный список дат в ключе '{key}'")
            values[attr] = days

        return cls(year=year, **values)

    def statistics(self) -> Dict[str, int]:
        """Количество дат в каждой категории"""
        return {attr: len(getattr(self, attr)) for _, attr in JSON_FIELDS}
