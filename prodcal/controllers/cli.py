"""
Модуль консольного интерфейса генератора календаря
"""

import logging
import sys
from datetime import datetime
from typing import Callable, Optional

from prodcal.models.errors import CalendarError, ServiceNotFound
from prodcal.services.base import CalendarService
from prodcal.services.registry import ServiceRegistry
from prodcal.utils.output import format_statistics, save_calendar

logger = logging.getLogger(__name__)


class CalendarCli:
    """Генерация календаря по параметрам командной строки и ответам пользователя"""

    def __init__(self, config: dict, registry: ServiceRegistry,
                 input_func: Callable[[str], str] = input, output=None):
        """
        Инициализация консольного интерфейса

        Args:
            config: Конфигурация приложения
            registry: Реестр доступных сервисов
            input_func: Функция чтения ответа пользователя
            output: Поток для вывода сообщений (по умолчанию stdout)
        """
        self.config = config
        self.registry = registry
        self.input_func = input_func
        self.output = output or sys.stdout
        cli_config = config.get('cli', {})
        self.min_year = cli_config.get('min_year', 2000)
        self.max_year = cli_config.get('max_year', 2100)
        self.default_service_name = cli_config.get('default_service')

    def _print(self, message: str = ''):
        print(message, file=self.output)

    @property
    def default_service(self) -> CalendarService:
        """Сервис из настройки cli.default_service, иначе первый в реестре"""
        if self.default_service_name:
            try:
                return self.registry.get(self.default_service_name)
            except ServiceNotFound:
                logger.warning(f"Сервис по умолчанию '{self.default_service_name}' не зарегистрирован")
        return self.registry.default

    def ask_year(self) -> int:
        """Запрос года у пользователя (пустой ввод - текущий год)"""
        while True:
            current_year = datetime.now().year
            answer = self.input_func(f"Введите год (по умолчанию текущий {current_year} год): ").strip()

            if not answer:
                return current_year

            if answer.isdecimal() and self.min_year <= int(answer) <= self.max_year:
                return int(answer)

            self._print(f"Некорректный год. Введите год от {self.min_year} до {self.max_year} "
                        f"или нажмите Enter для выбора текущего года.")

    def ask_service(self) -> CalendarService:
        """Выбор сервиса из списка (пустой ввод - сервис по умолчанию)"""
        services = list(self.registry)
        default = self.default_service
        default_number = services.index(default) + 1
        self._print("\nДоступные сервисы:")
        for i, service in enumerate(services, start=1):
            self._print(f"{i}. {service.name}")

        while True:
            answer = self.input_func(
                f"\nВыберите сервис (1-{len(services)}, по умолчанию {default_number}): ").strip()

            if not answer:
                return default

            if answer.isdecimal() and 1 <= int(answer) <= len(services):
                return services[int(answer) - 1]

            self._print("Некорректный выбор.")

    def select_service(self, service_name: Optional[str]) -> CalendarService:
        """Поиск сервиса по имени с переходом на сервис по умолчанию"""
        if service_name is None:
            return self.ask_service()
        try:
            return self.registry.get(service_name)
        except ServiceNotFound:
            default = self.default_service
            logger.warning(f"Сервис '{service_name}' не найден, используется {default.name}")
            self._print(f"Сервис '{service_name}' не найден. Используется сервис по умолчанию.")
            return default

    def run(self, year: Optional[int] = None, service_name: Optional[str] = None,
            output_path: Optional[str] = None) -> int:
        """
        Генерация календаря и сохранение в файл

        Args:
            year: Год (если не указан, запрашивается у пользователя)
            service_name: Имя сервиса (если не указано, предлагается выбор)
            output_path: Путь к файлу или каталогу

        Returns:
            Код завершения процесса
        """
        try:
            if year is None:
                year = self.ask_year()
            service = self.select_service(service_name)

            self._print(f"Используется сервис {service.name}")
            self._print(f"Генерация календаря за {year} год")

            calendar = service.get_calendar_data(year)

            path = save_calendar(calendar, output_path or self.config.get('output', {}).get('directory'))
            self._print(f"Календарь успешно сгенерирован и сохранен в файл: {path}")
            self._print()
            self._print(format_statistics(calendar))
            return 0
        except (CalendarError, OSError) as e:
            logger.error(f"Ошибка генерации календаря: {e}")
            self._print(f"Ошибка: {e}")
            return 1
