"""
Исключения генератора производственного календаря
"""


class CalendarError(Exception):
    """Базовая ошибка генератора календаря"""


class InputLengthMismatch(CalendarError, ValueError):
    """Длина последовательности кодов не совпадает с количеством дней в году"""


class InvalidDayCode(CalendarError, ValueError):
    """Код дня вне допустимого набора значений"""


class CalendarDataError(CalendarError, ValueError):
    """Некорректные данные сохраненного календаря"""


class SourceUnavailable(CalendarError):
    """Источник данных недоступен или вернул некорректные данные"""

    def __init__(self, service_name: str, message: str):
        self.service_name = service_name
        super().__init__(f"{service_name}: {message}")


class ServiceNotFound(CalendarError, KeyError):
    """Сервис с указанным именем не зарегистрирован"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self):
        return f"Сервис '{self.name}' не найден"
