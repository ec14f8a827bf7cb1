"""
Модуль агрегации кодов дней в производственный календарь
"""

import calendar
import logging
from typing import Sequence

import pandas as pd

from prodcal.models.calendar_data import CalendarYear, DayCode
from prodcal.models.errors import InputLengthMismatch
from prodcal.models.holidays import SUNDAY, is_regular_weekend

logger = logging.getLogger(__name__)


def days_in_year(year: int) -> int:
    """Количество дней в году"""
    return 366 if calendar.isleap(year) else 365


def _check_lengths(year: int, five_day_codes: Sequence, six_day_codes: Sequence):
    expected = days_in_year(year)
    if len(five_day_codes) != len(six_day_codes):
        raise InputLengthMismatch(
            f"Длины последовательностей различаются: {len(five_day_codes)} и {len(six_day_codes)}")
    for label, codes in (('5-дневной', five_day_codes), ('6-дневной', six_day_codes)):
        if len(codes) != expected:
            raise InputLengthMismatch(
                f"Для {label} недели получено {len(codes)} кодов, "
                f"ожидалось {expected} дней для {year} года")


def build_day_frame(year: int, five_day_codes: Sequence, six_day_codes: Sequence) -> pd.DataFrame:
    """
    Формирование таблицы дней года с кодами для обоих типов недели

    Args:
        year: Год
        five_day_codes: Коды дней для 5-дневной недели
        six_day_codes: Коды дней для 6-дневной недели

    Returns:
        DataFrame с колонками date, mmdd, weekday, code5, code6
    """
    _check_lengths(year, five_day_codes, six_day_codes)

    dates = pd.date_range(f'{year}-01-01', f'{year}-12-31', freq='D')
    df = pd.DataFrame({'date': dates})
    df['mmdd'] = df['date'].dt.strftime('%m%d')
    # 0 - воскресенье, 6 - суббота
    df['weekday'] = (df['date'].dt.dayofweek + 1) % 7
    df['code5'] = [DayCode.parse(c) for c in five_day_codes]
    df['code6'] = [DayCode.parse(c) for c in six_day_codes]
    return df


def aggregate(year: int, five_day_codes: Sequence, six_day_codes: Sequence) -> CalendarYear:
    """
    Формирование производственного календаря из кодов дней

    Args:
        year: Год
        five_day_codes: Коды дней для 5-дневной недели (индекс 0 = 1 января)
        six_day_codes: Коды дней для 6-дневной недели

    Returns:
        Неизменяемый объект CalendarYear

    Raises:
        InputLengthMismatch: Длина последовательностей не равна числу дней в году
        InvalidDayCode: Код дня вне допустимого набора
    """
    df = build_day_frame(year, five_day_codes, six_day_codes)

    nonworking_days = set()
    nonworking_days6 = set()
    working_days = set()
    shortened_days = set()
    shortened_days6 = set()

    for row in df.itertuples(index=False):
        # 5-дневная неделя: выходные суббота и воскресенье
        if row.code5 == DayCode.ORDINARY_NONWORKING:
            if not is_regular_weekend(row.weekday, six_day_week=False):
                nonworking_days.add(row.mmdd)
        elif row.code5 == DayCode.SHORTENED:
            shortened_days.add(row.mmdd)
        elif row.code5 == DayCode.FORCED_WORKING:
            working_days.add(row.mmdd)

        # 6-дневная неделя: выходное только воскресенье
        if row.code6 == DayCode.ORDINARY_NONWORKING:
            if row.weekday != SUNDAY:
                nonworking_days6.add(row.mmdd)
        elif row.code6 == DayCode.SHORTENED:
            shortened_days6.add(row.mmdd)

    result = CalendarYear(
        year=year,
        nonworking_days=nonworking_days,
        nonworking_days6=nonworking_days6,
        working_days=working_days,
        shortened_days=shortened_days,
        shortened_days6=shortened_days6,
    )
    logger.info(f"Календарь за {year} год сформирован: {result.statistics()}")
    return result
