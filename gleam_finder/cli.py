#!/usr/bin/env python3
"""
Command line entry point of GleamFinder.

Commands:
  search PAGE     Result URLs of one search page (0-based)
  resolve URL     Giveaway links embedded in a page
  giveaway URL    Parsed record of a giveaway page
  find            Search the first pages and resolve every result
  config          Show the effective configuration

Global options:
  --config PATH       YAML/JSON config (default: configs/default.yaml when present)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Also write logs to this file

Output options (search, resolve, giveaway, find):
  --json PATH         Save the JSON array to a file instead of stdout
  --pretty            Indent JSON on stdout

Every command prints a JSON array. Failures print a red message to stderr
and exit with status 1.

Example:
  gleam-finder --log-level INFO find --pages 2 --giveaways --pretty
"""
import asyncio
import sys
from pathlib import Path

import click

from gleam_finder import __version__
from gleam_finder.config import load_config
from gleam_finder.crawler.fetcher import Fetcher
from gleam_finder.engine import start_find
from gleam_finder.errors import GleamFinderError
from gleam_finder.gleam import fetch_giveaway
from gleam_finder.google import search
from gleam_finder.intermediary import resolve
from gleam_finder.logger import init_logging
from gleam_finder.report.json_report import dumps, render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def output_options(func):
    func = click.option(
        '--pretty', is_flag=True,
        help='Indent JSON output on stdout'
    )(func)
    func = click.option(
        '--json', '-j', 'json_output',
        default=None,
        type=click.Path(writable=True, dir_okay=False, path_type=Path),
        help='Save the JSON array to a file'
    )(func)
    return func


async def _with_fetcher(cfg, operation, target):
    async with Fetcher(cfg) as fetcher:
        return await operation(target, fetcher, cfg)


def _run(coro):
    try:
        return asyncio.run(coro)
    except GleamFinderError as e:
        print_error(f'Error: {e}')


def _emit(items, json_output, pretty):
    if json_output:
        try:
            saved = render_json(items, json_output)
        except OSError as e:
            print_error(f'Could not write JSON report: {e}')
        click.echo(f'JSON report: {saved}')
        return
    click.echo(dumps(items, pretty=pretty))


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='GleamFinder, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML or JSON config file.'
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
    help='Log file (stderr only when omitted)'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file):
    """GleamFinder: find giveaway links published in the last hour."""
    init_logging(level=log_level, log_file=str(log_file) if log_file else None)
    try:
        cfg = load_config(config_path)
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Could not load configuration: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('search', context_settings=CONTEXT_SETTINGS)
@click.argument('page', type=click.IntRange(min=0))
@output_options
@click.pass_context
def search_cmd(ctx, page, json_output, pretty):
    """Print the result URLs of search page PAGE."""
    cfg = ctx.obj['config']
    _emit(_run(_with_fetcher(cfg, search, page)), json_output, pretty)


@cli.command('resolve', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@output_options
@click.pass_context
def resolve_cmd(ctx, url, json_output, pretty):
    """Print the giveaway links found on URL."""
    cfg = ctx.obj['config']
    _emit(_run(_with_fetcher(cfg, resolve, url)), json_output, pretty)


@cli.command('giveaway', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@output_options
@click.pass_context
def giveaway_cmd(ctx, url, json_output, pretty):
    """Print the parsed giveaway at URL."""
    cfg = ctx.obj['config']
    giveaway = _run(_with_fetcher(cfg, fetch_giveaway, url))
    _emit([giveaway], json_output, pretty)


@cli.command('find', context_settings=CONTEXT_SETTINGS)
@click.option(
    '--pages', '-p', 'pages',
    type=click.IntRange(min=1),
    default=None,
    help='Number of result pages to walk (overrides config)'
)
@click.option(
    '--giveaways', 'with_giveaways', is_flag=True,
    help='Load and parse every giveaway found'
)
@output_options
@click.pass_context
def find_cmd(ctx, pages, with_giveaways, json_output, pretty):
    """Search, resolve every result and print the giveaway links."""
    cfg = ctx.obj['config']
    found = _run(start_find(cfg, pages=pages, with_giveaways=with_giveaways))
    _emit(found, json_output, pretty)


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Show the effective configuration as JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
