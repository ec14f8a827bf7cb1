"""
Базовый интерфейс сервиса получения данных производственного календаря
"""

import logging
from abc import ABC, abstractmethod
from typing import List

from prodcal.models.aggregator import aggregate
from prodcal.models.calendar_data import CalendarYear, DayCode
from prodcal.models.errors import InputLengthMismatch, InvalidDayCode, SourceUnavailable

logger = logging.getLogger(__name__)


class CalendarService(ABC):
    """Источник кодов дней для производственного календаря"""

    name: str = ''

    def __init__(self, config: dict = None):
        """
        Инициализация сервиса

        Args:
            config: Конфигурация приложения
        """
        self.config = config or {}
        self.service_config = self.config.get('services', {}).get(self.name) or {}

    @abstractmethod
    def fetch_day_codes(self, year: int, six_day_week: bool,
                        include_pre_holiday: bool = True) -> List[DayCode]:
        """
        Получение кодов дней за год

        Args:
            year: Год
            six_day_week: Признак шестидневной рабочей недели
            include_pre_holiday: Учитывать предпраздничные сокращенные дни

        Returns:
            Список кодов, по одному на каждый день года (индекс 0 = 1 января)

        Raises:
            SourceUnavailable: Источник недоступен или вернул некорректные данные
        """

    def postprocess(self, calendar: CalendarYear) -> CalendarYear:
        """Дополнительная обработка собранного календаря"""
        return calendar

    def get_calendar_data(self, year: int) -> CalendarYear:
        """
        Получение производственного календаря за год

        Args:
            year: Год

        Returns:
            Объект CalendarYear
        """
        logger.info(f"Получение данных за {year} год из {self.name}")
        five_day_codes = self.fetch_day_codes(year, six_day_week=False)
        six_day_codes = self.fetch_day_codes(year, six_day_week=True)

        try:
            calendar = aggregate(year, five_day_codes, six_day_codes)
        except (InputLengthMismatch, InvalidDayCode) as e:
            logger.error(f"Некорректные данные от {self.name}: {e}")
            raise SourceUnavailable(self.name, f"некорректные данные: {e}") from e

        return self.postprocess(calendar)

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r})"
