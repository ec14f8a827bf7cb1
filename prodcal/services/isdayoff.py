"""
Сервис календаря на основе API isdayoff.ru
"""

import logging
from typing import List

import requests

from prodcal.models.aggregator import days_in_year
from prodcal.models.calendar_data import DayCode
from prodcal.models.errors import InvalidDayCode, SourceUnavailable
from prodcal.services.base import CalendarService

logger = logging.getLogger(__name__)

# --- Константы ---
ISDAYOFF_API_URL = "https://isdayoff.ru/api/getdata"
DEFAULT_TIMEOUT = 30

# Коды ошибок API вместо строки с данными
API_ERRORS = {
    '100': 'ошибка в дате',
    '101': 'данные не найдены',
    '199': 'ошибка сервиса',
}


class IsDayOffService(CalendarService):
    """Получение кодов дней из API isdayoff.ru"""

    name = 'isdayoff.ru'

    def __init__(self, config: dict = None):
        super().__init__(config)
        self.url = self.service_config.get('url', ISDAYOFF_API_URL)
        self.timeout = self.service_config.get('timeout', DEFAULT_TIMEOUT)
        self.country_code = self.service_config.get('country_code', 'ru')
        self.headers = {}
        if self.service_config.get('user_agent'):
            self.headers['User-Agent'] = self.service_config['user_agent']

    def _build_params(self, year: int, six_day_week: bool, include_pre_holiday: bool) -> dict:
        params = {'year': year, 'cc': self.country_code}
        if six_day_week:
            params['sd'] = 1
        if include_pre_holiday:
            params['pre'] = 1  # pre=1 для учета сокращенных дней
        return params

    def fetch_day_codes(self, year: int, six_day_week: bool,
                        include_pre_holiday: bool = True) -> List[DayCode]:
        params = self._build_params(year, six_day_week, include_pre_holiday)
        week_label = '6-дневной' if six_day_week else '5-дневной'
        logger.info(f"Запрос к isdayoff.ru: {year} год, {week_label} неделя")

        try:
            response = requests.get(self.url, params=params, headers=self.headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            logger.error(f"Таймаут при запросе к isdayoff.ru для года {year}")
            raise SourceUnavailable(self.name, f"таймаут запроса для {year} года") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Проблема с запросом к isdayoff.ru для года {year}: {e}")
            raise SourceUnavailable(self.name, f"ошибка запроса: {e}") from e

        return self.parse_day_codes(year, response.text)

    def parse_day_codes(self, year: int, text: str) -> List[DayCode]:
        """
        Разбор строки цифр из ответа API

        Args:
            year: Год, для которого запрашивались данные
            text: Тело ответа

        Returns:
            Список кодов дней
        """
        day_types_str = (text or '').strip()

        if day_types_str in API_ERRORS:
            raise SourceUnavailable(
                self.name, f"API вернул код ошибки {day_types_str} ({API_ERRORS[day_types_str]})")

        if not day_types_str or not day_types_str.isdigit():
            logger.error(f"API isdayoff.ru вернул некорректные данные для года {year}: '{day_types_str[:100]}'")
            raise SourceUnavailable(self.name, "ответ не является строкой цифр")

        expected = days_in_year(year)
        if len(day_types_str) != expected:
            raise SourceUnavailable(
                self.name, f"получено {len(day_types_str)} кодов, ожидалось {expected}")

        try:
            return [DayCode.parse(c) for c in day_types_str]
        except InvalidDayCode as e:
            raise SourceUnavailable(self.name, str(e)) from e
