# === FILE: page_digest/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска PageDigest через командную строку.

Команды:
  run       Загрузить страницы, посчитать частоты слов и построить резюме
  config    Показать итоговую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (необязательно)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования

Опции конфигурации (run и config):
  -t, --targets PATH            Файл со списком URL (обязательно)
  -e, --exclude PATH            Файл со стоп-словами
  -n, --top-words INT           Сколько частых слов выводить [10]
  --threads, --workers INT      Число одновременно обрабатываемых URL [10]
  -s, --summary-sentences INT   Число предложений в резюме [3]
  --timeout SEC                 Таймаут одного HTTP-запроса [10]
  --job-timeout SEC             Дедлайн на один URL (по умолчанию нет)

Команда run опции:
  --json PATH         Сохранить JSON-отчёт в файл
  --html PATH         Сохранить HTML-отчёт в файл
  --pretty            Отступы в JSON-отчёте
  --quiet, -q         Не печатать результаты в консоль

Пример:
  page-digest run -t urls.txt -e stopwords.txt -n 5 -s 2 --json report.json
"""
import asyncio
import functools
import sys
from pathlib import Path

import click

from page_digest import __version__
from page_digest.aggregator import aggregate_results
from page_digest.config import load_config
from page_digest.engine import start_digest
from page_digest.errors import ConfigurationError
from page_digest.logger import init_logging
from page_digest.report.console import ConsoleSink
from page_digest.report.html_report import render_html
from page_digest.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def config_options(func):
    """Опции, которые перекрывают значения из файла конфигурации."""
    options = [
        click.option('--targets', '-t', 'targets', default=None,
                     type=click.Path(dir_okay=False, path_type=Path),
                     help='Файл со списком URL (по одному на строку)'),
        click.option('--exclude', '-e', 'exclude', default=None,
                     type=click.Path(dir_okay=False, path_type=Path),
                     help='Файл со стоп-словами (по одному на строку)'),
        click.option('--top-words', '-n', 'top_words', type=int, default=None,
                     help='Сколько самых частых слов выводить [10]'),
        click.option('--threads', '--workers', 'workers', type=int, default=None,
                     help='Число одновременно обрабатываемых URL [10]'),
        click.option('--summary-sentences', '-s', 'summary_sentences', type=int, default=None,
                     help='Число предложений в резюме [3]'),
        click.option('--timeout', 'timeout', type=float, default=None,
                     help='Таймаут одного HTTP-запроса, секунд [10]'),
        click.option('--job-timeout', 'job_timeout', type=float, default=None,
                     help='Дедлайн на обработку одного URL, секунд'),
    ]

    @functools.wraps(func)
    def wrapper(ctx, **kwargs):
        overrides = {name: kwargs.pop(name) for name in (
            'targets', 'exclude', 'top_words', 'workers',
            'summary_sentences', 'timeout', 'job_timeout',
        )}
        try:
            cfg = load_config(ctx.obj['config_path'], **overrides)
        except ConfigurationError as e:
            print_error(f'Ошибка конфигурации: {e}')
        return ctx.invoke(func, cfg, **kwargs)

    for option in reversed(options):
        wrapper = option(wrapper)
    return click.pass_context(wrapper)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='PageDigest, version %(version)s')
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
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд PageDigest CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path


@cli.command('run', context_settings=CONTEXT_SETTINGS)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-отчёт (отступ 2)'
)
@click.option(
    '--quiet', '-q', is_flag=True,
    help='Не печатать результаты в консоль'
)
@config_options
def run(cfg, json_output, html_output, pretty, quiet):
    """Обработать все URL из targets и вывести частые слова и резюме."""
    sink = None if quiet else ConsoleSink()
    try:
        results = asyncio.run(start_digest(cfg, sink=sink))
    except ConfigurationError as e:
        print_error(f'Ошибка конфигурации: {e}')
    except Exception as e:
        print_error(f'Ошибка при обработке: {e}')

    report = aggregate_results(results)

    # JSON-отчёт
    if json_output:
        try:
            saved_json = render_json(report, json_output, pretty=pretty)
            click.echo(f'JSON report: {saved_json}')
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    # HTML-отчёт
    if html_output:
        try:
            saved_html = render_html(report, html_output)
            click.echo(f'HTML report: {saved_html}')
        except OSError as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@config_options
def show_config(cfg):
    """Показать итоговую конфигурацию в JSON."""
    click.echo(cfg.model_dump_json(indent=2))


def main():
    cli(prog_name='page-digest')


if __name__ == "__main__":
    main()
