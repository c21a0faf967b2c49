"""sqlgrid CLI entrypoint."""

from __future__ import annotations

import click

from sqlgrid.render import RenderConfig, TableRenderer
from sqlgrid.shared.cli import CLIContext, common_cli_options, handle_cli_errors, pass_cli_context
from sqlgrid.sqlfmt.formatter import format_sql, format_sql_if_required
from sqlgrid.sqllog.logfile import log_file_path, log_sql
from sqlgrid.sqllog.result_file import clear_result_file, write_result_file

from .sources import SOURCE_FORMAT_CHOICES, load_result

LINE_BREAKS = {"native": None, "lf": "\n", "crlf": "\r\n", "cr": "\r"}


@click.group(help="Render SQL query results as aligned text grids.")
@common_cli_options
@handle_cli_errors
def cli(cli_ctx: CLIContext) -> None:
    """Primary Click group for sqlgrid commands."""
    cli_ctx.logger.debug("sqlgrid group initialised.")


@cli.command("render")
@click.argument("source", type=click.Path(allow_dash=True, path_type=str), default="-")
@click.option(
    "--format",
    "source_format",
    default="json",
    show_default=True,
    type=click.Choice(SOURCE_FORMAT_CHOICES),
    help="Format of the result set being rendered.",
)
@click.option("--limit", type=int, help="Maximum number of data rows to show.")
@click.option("--max-rows", type=int, help="Override the configured max-rows cap.")
@click.option("--fetch-size", type=int, help="Override the configured fetch size.")
@click.option("--column-width", type=int, help="Truncate cells wider than this (0 disables).")
@click.option("--unicode/--ascii", "use_unicode", default=None, help="Border glyph set.")
@click.option("--borders/--no-borders", "outside_borders", default=None, help="Draw outside borders.")
@click.option("--no-message", is_flag=True, help="Suppress the too-many-rows advisory.")
@click.option(
    "--line-break",
    type=click.Choice(tuple(LINE_BREAKS)),
    default="native",
    show_default=True,
    help="Line break used inside multi-line single values.",
)
@click.option("--listing", is_flag=True, help="Render as a plain listing without row limits or reshaping.")
@click.option("--result-file", type=click.Path(dir_okay=False, path_type=str), help="Also write the table here.")
@click.option("--append", is_flag=True, help="Append to --result-file instead of replacing it.")
@pass_cli_context
@handle_cli_errors
def render_result(
    cli_ctx: CLIContext,
    source: str,
    source_format: str,
    limit: int | None,
    max_rows: int | None,
    fetch_size: int | None,
    column_width: int | None,
    use_unicode: bool | None,
    outside_borders: bool | None,
    no_message: bool,
    line_break: str,
    listing: bool,
    result_file: str | None,
    append: bool,
) -> None:
    """Render a JSON or CSV result set (SOURCE, or '-' for stdin)."""
    config = _render_config(
        cli_ctx,
        max_rows=max_rows,
        fetch_size=fetch_size,
        column_width=column_width,
        use_unicode=use_unicode,
        no_message=no_message,
        line_break=line_break,
    )
    result = load_result(source, source_format, stdin=click.get_text_stream("stdin"))
    renderer = TableRenderer(config, logger=cli_ctx.logger)

    if listing:
        table = renderer.render_maps(result.records(), list(result.columns), add_outside_borders=outside_borders)
    else:
        table = renderer.render(result.positional(), limit, add_outside_borders=outside_borders)

    if not table.lines:
        cli_ctx.logger.info("Result set is empty.")
        return

    for line in table:
        click.echo(line)

    if result_file:
        path = write_result_file(table.text(config.line_break) + config.line_break, result_file, append=append)
        cli_ctx.logger.debug(f"Wrote {len(table)} lines to {path}")


@cli.command("clear-result")
@click.argument("result_file", type=click.Path(dir_okay=False, path_type=str))
@pass_cli_context
@handle_cli_errors
def clear_result(cli_ctx: CLIContext, result_file: str) -> None:
    """Empty a result file."""
    path = clear_result_file(result_file)
    cli_ctx.logger.debug(f"Cleared {path}")


@cli.command("format")
@click.argument("sql", required=False)
@click.option("--force", is_flag=True, help="Reformat even when the SQL already spans several lines.")
@pass_cli_context
@handle_cli_errors
def format_statement(cli_ctx: CLIContext, sql: str | None, force: bool) -> None:
    """Pretty-print SQL (argument, or stdin when omitted)."""
    text = _read_sql(sql)
    formatted = format_sql(text) if force else format_sql_if_required(text)
    click.echo(formatted)


@cli.command("log-sql")
@click.argument("sql", required=False)
@pass_cli_context
@handle_cli_errors
def log_statement(cli_ctx: CLIContext, sql: str | None) -> None:
    """Append SQL to today's history log."""
    text = _read_sql(sql)
    path = log_sql(text, cli_ctx.config.log.directory)
    cli_ctx.logger.success(f"Logged SQL to {path}")


@cli.command("log-path")
@pass_cli_context
@handle_cli_errors
def show_log_path(cli_ctx: CLIContext) -> None:
    """Print the latest history log file, or the log directory when none exists."""
    click.echo(str(log_file_path(cli_ctx.config.log.directory)))


@cli.command("config")
@pass_cli_context
@handle_cli_errors
def show_config(cli_ctx: CLIContext) -> None:
    """Show the effective rendering configuration."""
    settings = cli_ctx.config.render
    rows = [
        {"setting": "fetch_size", "value": settings.fetch_size},
        {"setting": "max_rows", "value": settings.max_rows},
        {"setting": "show_too_many_rows_message", "value": settings.show_too_many_rows_message},
        {"setting": "column_width_limit", "value": settings.column_width_limit or "unlimited"},
        {"setting": "use_unicode_borders", "value": settings.use_unicode_borders},
        {"setting": "add_outside_borders", "value": settings.add_outside_borders},
        {"setting": "line_break", "value": repr(settings.line_break)},
        {"setting": "log_directory", "value": str(cli_ctx.config.log.directory)},
    ]
    renderer = TableRenderer(RenderConfig.from_settings(settings))
    renderer.print_maps(rows, click.echo)


def _render_config(
    cli_ctx: CLIContext,
    *,
    max_rows: int | None,
    fetch_size: int | None,
    column_width: int | None,
    use_unicode: bool | None,
    no_message: bool,
    line_break: str,
) -> RenderConfig:
    config = RenderConfig.from_settings(cli_ctx.config.render)
    if max_rows is not None:
        config.set_max_rows(max_rows)
    if fetch_size is not None:
        config.set_fetch_size(fetch_size)
    if column_width is not None:
        config.set_column_width_limit(column_width)
    if use_unicode is not None:
        config.set_use_unicode_borders(use_unicode)
    if no_message:
        config.set_show_too_many_rows_message(False)
    if LINE_BREAKS[line_break] is not None:
        config.line_break = LINE_BREAKS[line_break]
    return config


def _read_sql(sql: str | None) -> str:
    text = sql if sql is not None else click.get_text_stream("stdin").read()
    if not text.strip():
        raise click.ClickException("SQL text must not be empty.")
    return text


def main() -> None:
    """Entry point for console_scripts."""
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
