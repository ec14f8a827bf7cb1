"""
Реестр доступных сервисов календаря
"""

import logging
from typing import Dict, Iterator, List

from prodcal.models.errors import ServiceNotFound
from prodcal.services.base import CalendarService
from prodcal.services.isdayoff import IsDayOffService
from prodcal.services.nalog_parser import NalogRuParserService
from prodcal.services.stub import StubService

logger = logging.getLogger(__name__)


class ServiceRegistry:
    """Упорядоченный набор сервисов с поиском по имени"""

    def __init__(self, services: List[CalendarService] = None):
        self._services: Dict[str, CalendarService] = {}
        for service in services or []:
            self.register(service)

    def register(self, service: CalendarService):
        """Регистрация сервиса (имя не зависит от регистра)"""
        key = service.name.lower()
        if key in self._services:
            raise ValueError(f"Сервис '{service.name}' уже зарегистрирован")
        self._services[key] = service

    def get(self, name: str) -> CalendarService:
        """
        Поиск сервиса по имени

        Args:
            name: Имя сервиса

        Returns:
            Экземпляр сервиса

        Raises:
            ServiceNotFound: Сервис не зарегистрирован
        """
        try:
            return self._services[name.strip().lower()]
        except KeyError:
            raise ServiceNotFound(name) from None

    @property
    def default(self) -> CalendarService:
        if not self._services:
            raise ServiceNotFound('<default>')
        return next(iter(self._services.values()))

    def names(self) -> List[str]:
        return [service.name for service in self._services.values()]

    def __iter__(self) -> Iterator[CalendarService]:
        return iter(list(self._services.values()))

    def __len__(self):
        return len(self._services)

    def __contains__(self, name: str):
        return name.strip().lower() in self._services


def build_default_registry(config: dict = None) -> ServiceRegistry:
    """Реестр со всеми сервисами в порядке приоритета"""
    registry = ServiceRegistry([
        IsDayOffService(config),
        NalogRuParserService(config),
        StubService(config),
    ])
    logger.debug(f"Зарегистрированы сервисы: {registry.names()}")
    return registry
