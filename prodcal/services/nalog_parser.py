"""
Парсер производственного календаря с сайта nalog-nalog.ru
"""

import logging
from datetime import date
from typing import Dict, List

import requests
from bs4 import BeautifulSoup

from prodcal.models.aggregator import days_in_year
from prodcal.models.calendar_data import CalendarYear, DayCode
from prodcal.models.errors import SourceUnavailable
from prodcal.models.holidays import is_regular_weekend, overlay_statutory_holidays, sunday_based_weekday
from prodcal.services.base import CalendarService

logger = logging.getLogger(__name__)

NALOG_BASE_URL = "https://nalog-nalog.ru/proizvodstvennyj_kalendar"
DEFAULT_TIMEOUT = 30
DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"

MONTHS_RU = {
    "январь": 1, "февраль": 2, "март": 3, "апрель": 4, "май": 5, "июнь": 6,
    "июль": 7, "август": 8, "сентябрь": 9, "октябрь": 10, "ноябрь": 11, "декабрь": 12,
}


def get_month_number(month_name: str) -> int:
    """Номер месяца по названию (0, если название не распознано)"""
    return MONTHS_RU.get(month_name.strip().lower(), 0)


def classify_cell(css_classes: List[str], weekday: int, six_day_week: bool) -> DayCode:
    """
    Определение кода дня по CSS-классам ячейки календаря

    Args:
        css_classes: Классы ячейки
        weekday: Номер дня недели (0 - воскресенье)
        six_day_week: Признак шестидневной недели

    Returns:
        Код дня
    """
    if 'holiday' in css_classes:
        # Так на сайте отмечены предпраздничные сокращенные дни
        return DayCode.SHORTENED
    if 'festive' in css_classes:
        return DayCode.ORDINARY_NONWORKING
    if is_regular_weekend(weekday, six_day_week):
        # Выходной, отображенный как рабочий день (перенос)
        return DayCode.FORCED_WORKING
    return DayCode.ORDINARY_WORKING


class NalogRuParserService(CalendarService):
    """Получение кодов дней разбором HTML-страниц nalog-nalog.ru"""

    name = 'nalog-nalog.ru'

    def __init__(self, config: dict = None):
        super().__init__(config)
        self.base_url = self.service_config.get('url', NALOG_BASE_URL).rstrip('/')
        self.timeout = self.service_config.get('timeout', DEFAULT_TIMEOUT)
        self.headers = {'User-Agent': self.service_config.get('user_agent', DEFAULT_USER_AGENT)}

    def page_url(self, year: int, six_day_week: bool) -> str:
        suffix = '-6' if six_day_week else ''
        return f"{self.base_url}/{year}{suffix}/"

    def fetch_page(self, year: int, six_day_week: bool) -> str:
        """Загрузка HTML-страницы календаря"""
        url = self.page_url(year, six_day_week)
        logger.info(f"Загрузка страницы {url}")
        try:
            response = requests.get(url, headers=self.headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"Не удалось загрузить {url}: {e}")
            raise SourceUnavailable(self.name, f"ошибка загрузки страницы: {e}") from e
        return response.text

    def fetch_day_codes(self, year: int, six_day_week: bool,
                        include_pre_holiday: bool = True) -> List[DayCode]:
        html = self.fetch_page(year, six_day_week)
        codes = self.parse_calendar_page(html, year, six_day_week)
        if not include_pre_holiday:
            # Сокращенные дни считаем обычными рабочими
            codes = [DayCode.ORDINARY_WORKING if c == DayCode.SHORTENED else c for c in codes]
        return codes

    def parse_calendar_page(self, html: str, year: int, six_day_week: bool) -> List[DayCode]:
        """
        Разбор HTML-страницы календаря в последовательность кодов дней

        Args:
            html: Текст страницы
            year: Год
            six_day_week: Признак шестидневной недели

        Returns:
            Список кодов, по одному на каждый день года

        Raises:
            SourceUnavailable: Разметка не содержит всех дней года
        """
        soup = BeautifulSoup(html, "html.parser")
        month_nodes = soup.select("div.calendar_month")
        if not month_nodes:
            raise SourceUnavailable(self.name, "на странице не найдены блоки месяцев")

        parsed: Dict[date, DayCode] = {}
        for month_node in month_nodes:
            month_name_node = month_node.select_one("a.calendar_month_name")
            if month_name_node is None:
                continue
            month = get_month_number(month_name_node.get_text())
            if month == 0:
                logger.warning(f"Неизвестное название месяца: '{month_name_node.get_text(strip=True)}'")
                continue

            for cell in month_node.select("div.calendar_day"):
                day_text = cell.get_text(strip=True)
                if not day_text.isdigit():
                    continue
                try:
                    current = date(year, month, int(day_text))
                except ValueError:
                    continue
                weekday = sunday_based_weekday(current)
                parsed[current] = classify_cell(cell.get('class', []), weekday, six_day_week)

        expected = days_in_year(year)
        if len(parsed) != expected:
            raise SourceUnavailable(
                self.name, f"в разметке найдено {len(parsed)} дней, ожидалось {expected}")

        return [parsed[d] for d in sorted(parsed)]

    def postprocess(self, calendar: CalendarYear) -> CalendarYear:
        return overlay_statutory_holidays(calendar)
