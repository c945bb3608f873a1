"""Command line interface for tailr."""

import logging
from typing import Any, Optional

import click
from click.core import ParameterSource

from . import __version__, configure_logging
from .core.count import TakeValue, parse_take_value
from .errors import IllegalCountError, TailError
from .file.tail import Tail

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class TakeValueParamType(click.ParamType):
    """Converts ``-n``/``-c`` text into a TakeValue."""

    name = "count"

    def __init__(self, field_name: str):
        self.field_name = field_name

    def convert(self, value: Any, param: Optional[click.Parameter], ctx: Optional[click.Context]) -> TakeValue:
        if not isinstance(value, str):
            return value
        try:
            return parse_take_value(value, self.field_name)
        except IllegalCountError as e:
            self.fail(str(e), param, ctx)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("files", metavar="FILE...", nargs=-1, required=True)
@click.option(
    "-c",
    "--bytes",
    "byte_spec",
    metavar="BYTES",
    type=TakeValueParamType("byte"),
    default=None,
    help="Number of bytes; +K starts at the Kth byte",
)
@click.option(
    "-n",
    "--lines",
    "line_spec",
    metavar="LINES",
    type=TakeValueParamType("line"),
    default="10",
    show_default=True,
    help="Number of lines; +K starts at the Kth line",
)
@click.option("-q", "--quiet", is_flag=True, help="Suppress headers")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="TAILR_LOG_LEVEL",
    help="Diagnostic logging level",
)
@click.version_option(__version__, prog_name="tailr")
@click.pass_context
def main(ctx, files, byte_spec, line_spec, quiet, log_level):
    """Display the tail of one or more files."""
    configure_logging(getattr(logging, log_level.upper()))

    if byte_spec is not None and ctx.get_parameter_source("line_spec") is ParameterSource.COMMANDLINE:
        raise click.UsageError("--bytes and --lines cannot be used together", ctx=ctx)

    logger.debug(f"files={list(files)} bytes={byte_spec} lines={line_spec} quiet={quiet}")

    tail = Tail(line_spec=line_spec, byte_spec=byte_spec, quiet=quiet)
    try:
        tail.run(files)
    except TailError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
