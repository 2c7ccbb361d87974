import sys
import click
import logging
from .errors import format_error, Md2HtmlError
from .logging import configure_logging
from .config import get_assets, get_log_level
from .converter import convert

# Configure logging at module level
configure_logging(get_log_level())
logger = logging.getLogger(__name__)

USAGE = "Usage: md2html <file.md> [file2.md ...]"


# Every argument is a path, including ones that look like options
@click.command(context_settings={"help_option_names": [], "ignore_unknown_options": True})
@click.argument("files", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx, files):
    """md2html: turn markdown files into self-rendering HTML pages."""
    if not files:
        click.echo(USAGE, err=True)
        ctx.exit(1)

    assets = get_assets()
    converted = 0
    for f in files:
        try:
            output_path = convert(f, assets)
        except Md2HtmlError as e:
            logger.debug(f"Skipping {click.format_filename(f)}: {e.details}")
            click.echo(e.message, err=True)
            continue
        converted += 1
        click.echo(f"Created: {click.format_filename(output_path)}")

    logger.info(f"Converted {converted} of {len(files)} file(s)")


def main():
    """Entry point for the CLI."""
    try:
        code = cli(standalone_mode=False)
    except Exception as e:
        if isinstance(e, click.exceptions.Abort):
            sys.exit(130)

        if isinstance(e, click.exceptions.UsageError):
            click.echo(USAGE, err=True)
            sys.exit(1)

        click.echo(format_error(e), err=True)
        sys.exit(1)

    # Non-standalone click returns the ctx.exit code instead of exiting
    sys.exit(code if isinstance(code, int) else 0)

if __name__ == "__main__":
    main()
