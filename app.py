"""
Генератор производственного календаря РФ
Точка входа командной строки
"""

import argparse
import logging
import sys

from prodcal.controllers.cli import CalendarCli
from prodcal.services.registry import ServiceRegistry, build_default_registry
from prodcal.utils.config import load_config


def parse_args(argv=None) -> argparse.Namespace:
    """Разбор аргументов командной строки"""
    parser = argparse.ArgumentParser(description="Генератор календарей рабочих дней")
    parser.add_argument('-y', '--year', type=int, default=None,
                        help="Год для генерации календаря")
    parser.add_argument('-s', '--service', default=None,
                        help="Выбор сервиса (по умолчанию: isdayoff.ru)")
    parser.add_argument('-o', '--output', default=None,
                        help="Путь для сохранения JSON файла (по умолчанию: текущая папка и название [год].json)")
    parser.add_argument('-c', '--config', default='config.yaml',
                        help="Путь к файлу конфигурации")
    parser.add_argument('--log-level', default=None,
                        help="Уровень логирования (DEBUG, INFO, WARNING, ERROR)")
    return parser.parse_args(argv)


def main(argv=None, registry: ServiceRegistry = None, input_func=input) -> int:
    args = parse_args(argv)
    config = load_config(args.config)

    log_config = config.get('logging', {})
    level_name = (args.log_level or log_config.get('level', 'INFO')).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=log_config.get('format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    )

    if registry is None:
        registry = build_default_registry(config)

    cli = CalendarCli(config, registry, input_func=input_func)
    return cli.run(year=args.year, service_name=args.service, output_path=args.output)


if __name__ == '__main__':
    sys.exit(main())
