"""
Государственные праздники РФ и правила регулярных выходных
"""

import dataclasses
import logging
from datetime import date
from typing import FrozenSet

from prodcal.models.calendar_data import CalendarYear

logger = logging.getLogger(__name__)

# --- Константы ---
SUNDAY = 0
SATURDAY = 6

# Новогодние каникулы (1-8 января) добавляются всегда
NEW_YEAR_HOLIDAYS = tuple((1, day) for day in range(1, 9))

# Остальные фиксированные праздники по ст. 112 ТК РФ
STATUTORY_HOLIDAY_NAMES = {
    (2, 23): 'День защитника Отечества',
    (3, 8): 'Международный женский день',
    (5, 1): 'Праздник Весны и Труда',
    (5, 9): 'День Победы',
    (6, 12): 'День России',
    (11, 4): 'День народного единства',
}


def sunday_based_weekday(day: date) -> int:
    """Номер дня недели: 0 - воскресенье, 6 - суббота"""
    return (day.weekday() + 1) % 7


def is_regular_weekend(weekday: int, six_day_week: bool) -> bool:
    """
    Является ли день стандартным выходным для заданного типа недели

    Args:
        weekday: Номер дня недели (0 - воскресенье, 6 - суббота)
        six_day_week: Признак шестидневной рабочей недели

    Returns:
        True для регулярного выходного
    """
    if six_day_week:
        return weekday == SUNDAY
    return weekday in (SUNDAY, SATURDAY)


def statutory_nonworking_days(year: int, six_day_week: bool) -> FrozenSet[str]:
    """
    Праздничные нерабочие дни, не совпадающие с регулярными выходными

    Args:
        year: Год
        six_day_week: Признак шестидневной рабочей недели

    Returns:
        Множество дат в формате MMDD
    """
    result = {f"{month:02d}{day:02d}" for month, day in NEW_YEAR_HOLIDAYS}

    for (month, day), name in STATUTORY_HOLIDAY_NAMES.items():
        weekday = sunday_based_weekday(date(year, month, day))
        if is_regular_weekend(weekday, six_day_week):
            logger.debug(f"{name} ({day:02d}.{month:02d}.{year}) приходится на выходной")
            continue
        result.add(f"{month:02d}{day:02d}")

    return frozenset(result)


def overlay_statutory_holidays(calendar: CalendarYear) -> CalendarYear:
    """
    Дополнение нерабочих дней календаря государственными праздниками

    Даты, уже отмеченные как рабочие или сокращенные, не переносятся
    в нерабочие.

    Args:
        calendar: Исходный календарь

    Returns:
        Новый календарь с объединенными списками нерабочих дней
    """
    taken5 = set(calendar.working_days) | set(calendar.shortened_days)
    taken6 = set(calendar.shortened_days6)

    extra5 = statutory_nonworking_days(calendar.year, six_day_week=False) - taken5
    extra6 = statutory_nonworking_days(calendar.year, six_day_week=True) - taken6

    added = len(extra5 - set(calendar.nonworking_days)) + len(extra6 - set(calendar.nonworking_days6))
    if added:
        logger.info(f"Добавлено {added} праздничных дней из таблицы ТК РФ")

    return dataclasses.replace(
        calendar,
        nonworking_days=set(calendar.nonworking_days) | extra5,
        nonworking_days6=set(calendar.nonworking_days6) | extra6,
    )
