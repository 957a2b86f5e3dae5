"""Command-line interface for the JSON Round-Tripper."""

import logging
import sys
import click
from pathlib import Path
from typing import Optional
from . import __version__
from .round_tripper import JSONRoundTripper
from .printer import DEFAULT_INDENT
from .types import FormatMode, ParseError, ProcessingError


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _make_round_tripper(indent: Optional[int], verbose: bool) -> JSONRoundTripper:
    return JSONRoundTripper(
        indent=" " * indent if indent else DEFAULT_INDENT,
        enable_profiling=verbose,
    )


def _fail(round_tripper: JSONRoundTripper, error: ProcessingError) -> None:
    """Report an error and exit with the status the error handler picks."""
    response = round_tripper.error_handler.handle_processing_error(error)

    if isinstance(error, ParseError):
        click.echo(error.error_before())
    else:
        click.echo(f"❌ Error: {error}", err=True)
    click.echo(f"   • {response.suggested_action}", err=True)

    click.get_current_context().exit(response.exit_code)


def _round_trip_command(input_file: Path, mode: FormatMode, indent: Optional[int],
                        output: Optional[Path], verbose: bool) -> None:
    _configure_logging(verbose)
    round_tripper = _make_round_tripper(indent, verbose)

    result = round_tripper.round_trip_file(input_file, mode)
    if not result.success:
        _fail(round_tripper, result.error)
        return

    if output:
        try:
            write_result = round_tripper.file_writer.write_text(output, result.output)
        except ProcessingError as e:
            _fail(round_tripper, e)
            return
        click.echo(f"✅ Wrote {write_result['size']} bytes to {write_result['path']}")
    else:
        click.echo(result.output)


input_argument = click.argument(
    'input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
indent_option = click.option(
    '--indent', '-i', type=click.IntRange(min=1), default=None,
    help='Indent pretty output with N spaces (default: one tab)'
)
output_option = click.option(
    '--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
    help='Write JSON to this file instead of standard output'
)
verbose_option = click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')


@click.group()
@click.version_option(version=__version__)
def main():
    """JSON Round-Tripper - Parse a JSON file and print it compact or pretty."""
    pass


@main.command('print')
@input_argument
@click.option('--mode', '-m', type=click.Choice([m.value for m in FormatMode], case_sensitive=False),
              default=FormatMode.COMPACT.value, show_default=True, help='Output format')
@indent_option
@output_option
@verbose_option
def print_json(input_file: Path, mode: str, indent: Optional[int],
               output: Optional[Path], verbose: bool):
    """Parse INPUT_FILE and print it in the selected format."""
    _round_trip_command(input_file, FormatMode(mode.lower()), indent, output, verbose)


@main.command()
@input_argument
@output_option
@verbose_option
def minify(input_file: Path, output: Optional[Path], verbose: bool):
    """Print INPUT_FILE with all insignificant whitespace removed."""
    _round_trip_command(input_file, FormatMode.COMPACT, None, output, verbose)


@main.command('format')
@input_argument
@indent_option
@output_option
@verbose_option
def format_json(input_file: Path, indent: Optional[int], output: Optional[Path], verbose: bool):
    """Print INPUT_FILE indented, one element per line."""
    _round_trip_command(input_file, FormatMode.PRETTY, indent, output, verbose)


@main.command()
@input_argument
@verbose_option
def stats(input_file: Path, verbose: bool):
    """Show node counts, nesting depth and output sizes for INPUT_FILE."""
    _configure_logging(verbose)
    round_tripper = _make_round_tripper(None, verbose)

    try:
        text = round_tripper.file_reader.read_text(input_file)
        value = round_tripper.parse(text)
    except ProcessingError as e:
        _fail(round_tripper, e)
        return

    statistics = round_tripper.parser.get_structure_statistics(value)
    compact_size = len(round_tripper.print(value, FormatMode.COMPACT).encode('utf-8'))
    pretty_size = len(round_tripper.print(value, FormatMode.PRETTY).encode('utf-8'))

    click.echo(f"📄 {input_file}")
    click.echo(f"   Root:         {statistics.root_kind.value}")
    click.echo(f"   Nodes:        {statistics.node_count}")
    click.echo(f"   Objects:      {statistics.object_count} ({statistics.total_keys} keys)")
    click.echo(f"   Arrays:       {statistics.array_count} ({statistics.total_items} items)")
    click.echo(f"   Strings:      {statistics.string_count}")
    click.echo(f"   Numbers:      {statistics.number_count}")
    click.echo(f"   Booleans:     {statistics.boolean_count}")
    click.echo(f"   Nulls:        {statistics.null_count}")
    click.echo(f"   Max depth:    {statistics.max_depth}")
    click.echo(f"   Input size:   {len(text.encode('utf-8'))} bytes")
    click.echo(f"   Compact size: {compact_size} bytes")
    click.echo(f"   Pretty size:  {pretty_size} bytes")


if __name__ == '__main__':
    main()
