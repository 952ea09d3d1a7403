#!/usr/bin/env python3
"""
Command line entry point for the PageScout extraction engine.

Commands:
  snapshot  Depth-bounded element snapshot of a page (JSON)
  markdown  Main content of a page as Markdown (JSON or plain Markdown)
  config    Show the effective configuration

Common options:
  --config PATH       YAML/JSON settings file (default: configs/default.yaml if present)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stderr only when omitted)
  --log-format FORMAT Logging format string

Sources are HTML files (.html/.htm) or JSON page captures (.json).

Example:
  page_scout snapshot page.json --max-depth 5 --pretty
  page_scout markdown saved.html --document
"""
import sys
from pathlib import Path

import click

from page_scout import __version__
from page_scout.config import load_config
from page_scout.engine import Engine
from page_scout.errors import PageScoutError
from page_scout.logger import init_logging
from page_scout.report.json_report import render_json
from page_scout.serialize import serialize

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='PageScout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML/JSON settings file.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file path (stderr only when omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Format string for log records'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """PageScout command group."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Failed to load configuration: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg
    ctx.obj['engine'] = Engine(cfg)


def _load(engine: Engine, source: Path, url):
    try:
        return engine.load_source(source, url=url)
    except (PageScoutError, OSError, ValueError) as e:
        print_error(f'Failed to load {source}: {e}')


def _emit(result, json_output, pretty):
    if json_output:
        try:
            saved = render_json(result, json_output, pretty=pretty)
        except (PageScoutError, OSError) as e:
            print_error(f'Failed to save JSON: {e}')
        click.echo(f'JSON report: {saved}')
        return
    try:
        click.echo(serialize(result, pretty=pretty))
    except PageScoutError as e:
        print_error(f'JSON serialization error: {e}')


@cli.command('snapshot', context_settings=CONTEXT_SETTINGS)
@click.argument('source', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--max-depth', '-d', 'max_depth', type=click.IntRange(min=0), default=None,
              help='Deepest element level to keep (overrides max_depth)')
@click.option('--url', '-u', 'url', default=None, help='Page URL to record')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save the JSON result to a file'
)
@click.option('--pretty', is_flag=True, help='Indent JSON output (2 spaces)')
@click.pass_context
def snapshot(ctx, source, max_depth, url, json_output, pretty):
    """Extract the element snapshot of SOURCE."""
    engine = ctx.obj['engine']
    capture = _load(engine, source, url)
    try:
        result = engine.snapshot(capture, max_depth=max_depth)
    except PageScoutError as e:
        print_error(f'Snapshot failed: {e}')
    _emit(result, json_output, pretty or ctx.obj['config'].pretty)


@cli.command('markdown', context_settings=CONTEXT_SETTINGS)
@click.argument('source', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--url', '-u', 'url', default=None, help='Page URL to record')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save the JSON result to a file'
)
@click.option('--pretty', is_flag=True, help='Indent JSON output (2 spaces)')
@click.option('--document', is_flag=True,
              help='Print the title-headed Markdown instead of JSON')
@click.pass_context
def markdown(ctx, source, url, json_output, pretty, document):
    """Render the main content of SOURCE as Markdown."""
    engine = ctx.obj['engine']
    capture = _load(engine, source, url)
    try:
        result = engine.markdown(capture)
    except PageScoutError as e:
        print_error(f'Markdown rendering failed: {e}')
    if document and not json_output:
        click.echo(result.as_document())
        return
    _emit(result, json_output, pretty or ctx.obj['config'].pretty)


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Show the current configuration as JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
