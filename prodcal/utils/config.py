"""
Загрузка конфигурации приложения
"""

import copy
import logging

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    'services': {
        'isdayoff.ru': {
            'url': 'https://isdayoff.ru/api/getdata',
            'timeout': 30,
            'country_code': 'ru',
        },
        'nalog-nalog.ru': {
            'url': 'https://nalog-nalog.ru/proizvodstvennyj_kalendar',
            'timeout': 30,
            'user_agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36',
        },
        'stub': {},
    },
    'output': {
        'directory': '',
    },
    'cli': {
        'min_year': 2000,
        'max_year': 2100,
        'default_service': None,
    },
    'logging': {
        'level': 'INFO',
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    },
}


def _merge(base: dict, override: dict) -> dict:
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(config_path: str = 'config.yaml') -> dict:
    """
    Загрузка конфигурации из YAML файла

    Args:
        config_path: Путь к файлу конфигурации

    Returns:
        Конфигурация, дополненная значениями по умолчанию
    """
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            loaded = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Ошибка загрузки конфигурации: {e}")
        # Возвращаем конфигурацию по умолчанию
        return copy.deepcopy(DEFAULT_CONFIG)

    if not isinstance(loaded, dict):
        logger.error(f"Конфигурация {config_path} должна быть словарем, используются значения по умолчанию")
        return copy.deepcopy(DEFAULT_CONFIG)

    return _merge(DEFAULT_CONFIG, loaded)
