# === FILE: paw_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска PawScout через командную строку.

Команды:
  run       Обойти все источники и вывести/сохранить отчёт
  config    Показать текущую конфигурацию
  sources   Перечислить источники и их стратегии извлечения

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml,
                      иначе встроенный список сайтов)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования

Команда run опции:
  --html PATH         Сохранить HTML-отчёт в файл
  --json PATH         Сохранить JSON-отчёт в файл
  --template DIR      Папка с Jinja2-шаблонами
  --pretty            Преформатировать JSON-вывод (отступ 2)
  --scan-timeout SEC  Таймаут всего обхода (секунд)

Без --html и --json HTML-отчёт печатается в stdout.

Пример:
  paw_scout run --html public/index.html --json public/pets.json --pretty
"""
import asyncio
import sys
from pathlib import Path

import click

from paw_scout import __version__
from paw_scout.config import load_config
from paw_scout.engine import Engine
from paw_scout.logger import DEFAULT_FORMAT, init_logging
from paw_scout.report import powered_by, render_html, render_html_string, render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='PawScout, version %(version)s')
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
    help='Путь к файлу логов (stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд PawScout CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('run', context_settings=CONTEXT_SETTINGS)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблонами (по умолчанию встроенный шаблон)'
)
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-вывод (отступ 2)'
)
@click.option(
    '--scan-timeout', 'scan_timeout',
    type=float,
    default=None,
    help='Таймаут всего обхода (секунд)'
)
@click.pass_context
def run(ctx, html_output, json_output, template_dir, pretty, scan_timeout):
    """Обойти источники и сгенерировать отчёт."""
    cfg = ctx.obj['config']
    try:
        report = Engine(cfg).run(scan_timeout=scan_timeout)
    except asyncio.TimeoutError:
        print_error(f'Обход не завершён за {scan_timeout} секунд')
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    tagline = powered_by()

    # Если не сохраняем в файл, печатаем HTML в stdout
    if not json_output and not html_output:
        try:
            click.echo(render_html_string(report, template_dir, tagline))
        except Exception as e:
            print_error(f'Ошибка при генерации HTML: {e}')
        return

    if json_output:
        try:
            saved_json = render_json(report, json_output, pretty)
            click.echo(f'JSON report: {saved_json}', err=True)
        except Exception as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(report, template_dir, html_output, tagline)
            click.echo(f'HTML report: {saved_html}', err=True)
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


@cli.command('sources', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def list_sources(ctx):
    """Перечислить источники: стратегия и URL."""
    cfg = ctx.obj['config']
    for src in cfg.sources:
        click.echo(f'{src.kind:<10} {src.url}')


if __name__ == "__main__":
    cli()
