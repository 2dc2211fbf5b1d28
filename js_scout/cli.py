# === FILE: js_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска JsScout через командную строку.

Команды:
  scan DOMAIN [SCHEME]    Обойти домен, найти JS-файлы и проверить их доступность
  config [DOMAIN] [SCHEME]  Показать итоговую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (необязателен)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stdout, если не указан)
  --log-format FORMAT Формат логирования

Команда scan опции:
  --output-dir DIR    Каталог для <domain>_{all,good,bad}_js.txt
  --timeout SEC       Таймаут одного HTTP-запроса
  --max-pages N       Лимит страниц обхода
  --method GET|HEAD   Метод проверки JS-файлов
  --concurrency N     Число одновременных проверок
  --retries N         Повторы проверки при сетевой ошибке
  --json PATH         Сохранить JSON-сводку в файл
  --scan-timeout SEC  Таймаут всего запуска (секунд)

Дополнительно:
  --version, -v       Показать версию JsScout

Пример:
  js-scout scan example.com https --output-dir out --json out/example.com.json
"""
import sys
import asyncio
from pathlib import Path

import click
from pydantic import ValidationError

from js_scout import __version__
from js_scout.config import load_config
from js_scout.engine import start_scan
from js_scout.logger import DEFAULT_FORMAT, init_logging
from js_scout.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _build_config(ctx, **overrides):
    try:
        return load_config(ctx.obj['config_path'], **overrides)
    except ValidationError as e:
        print_error(f'Ошибка конфигурации: {e}')
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='JsScout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stdout, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд JsScout CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path


@cli.command('scan', context_settings=CONTEXT_SETTINGS)
@click.argument('domain')
@click.argument('scheme', required=False)
@click.option(
    '--output-dir', '-o', 'output_dir',
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help='Каталог для списков JS (по умолчанию текущий)'
)
@click.option('--timeout', type=float, default=None, help='Таймаут одного запроса (секунд)')
@click.option('--max-pages', 'max_pages', type=int, default=None, help='Макс. число страниц обхода')
@click.option(
    '--method', 'probe_method',
    type=click.Choice(['GET', 'HEAD'], case_sensitive=False),
    default=None,
    help='HTTP-метод проверки JS-файлов'
)
@click.option('--concurrency', 'verify_concurrency', type=int, default=None, help='Одновременных проверок')
@click.option('--retries', 'retry_times', type=int, default=None, help='Повторы при сетевой ошибке')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-сводку в файл'
)
@click.option(
    '--scan-timeout', 'scan_timeout',
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help='Таймаут всего запуска (секунд)'
)
@click.pass_context
def scan(ctx, domain, scheme, output_dir, timeout, max_pages, probe_method,
         verify_concurrency, retry_times, json_output, scan_timeout):
    """Обойти DOMAIN (схема SCHEME, по умолчанию https) и проверить найденные JS-файлы."""
    cfg = _build_config(
        ctx,
        domain=domain,
        scheme=scheme,
        output_dir=output_dir,
        timeout=timeout,
        max_pages=max_pages,
        probe_method=probe_method,
        verify_concurrency=verify_concurrency,
        retry_times=retry_times,
    )
    click.echo(f'Starting crawl of {cfg.root_url}')
    try:
        if scan_timeout is not None:
            report = asyncio.run(
                asyncio.wait_for(start_scan(cfg), timeout=scan_timeout)
            )
        else:
            report = asyncio.run(start_scan(cfg))
    except asyncio.TimeoutError:
        print_error(f'Обход не завершён за {scan_timeout} секунд')
    except KeyboardInterrupt:
        print_error('Обход прерван пользователем')
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    crawl = report.crawl
    click.echo(f'Pages visited: {crawl.visited_count}, JS files found: {len(crawl.resources)}')
    if report.classified is not None:
        click.echo(
            f'Reachable: {len(report.classified.reachable)}, '
            f'broken: {len(report.classified.broken)}'
        )
    for kind, path in report.files.items():
        click.echo(f'{kind}: {path}')

    if json_output:
        try:
            saved_json = render_json(report, json_output)
            click.echo(f'JSON report: {saved_json}')
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if report.errors:
        print_error('Не удалось записать: ' + '; '.join(report.errors))


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.argument('domain', required=False)
@click.argument('scheme', required=False)
@click.pass_context
def show_config(ctx, domain, scheme):
    """Показать итоговую конфигурацию в JSON."""
    cfg = _build_config(ctx, domain=domain, scheme=scheme)
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
