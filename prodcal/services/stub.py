"""
Офлайн-сервис: календарь только по дням недели и таблице праздников
"""

from datetime import date, timedelta
from typing import List

from prodcal.models.aggregator import days_in_year
from prodcal.models.calendar_data import CalendarYear, DayCode
from prodcal.models.holidays import (
    is_regular_weekend,
    overlay_statutory_holidays,
    statutory_nonworking_days,
    sunday_based_weekday,
)
from prodcal.services.base import CalendarService


class StubService(CalendarService):
    """Источник без сетевых запросов, переносы и сокращенные дни не учитываются"""

    name = 'stub'

    def fetch_day_codes(self, year: int, six_day_week: bool,
                        include_pre_holiday: bool = True) -> List[DayCode]:
        holidays = statutory_nonworking_days(year, six_day_week)
        start = date(year, 1, 1)
        codes = []
        for i in range(days_in_year(year)):
            current = start + timedelta(days=i)
            weekday = sunday_based_weekday(current)
            if is_regular_weekend(weekday, six_day_week) or current.strftime('%m%d') in holidays:
                codes.append(DayCode.ORDINARY_NONWORKING)
            else:
                codes.append(DayCode.ORDINARY_WORKING)
        return codes

    def postprocess(self, calendar: CalendarYear) -> CalendarYear:
        # Новогодние каникулы включаются и в выходные дни
        return overlay_statutory_holidays(calendar)
