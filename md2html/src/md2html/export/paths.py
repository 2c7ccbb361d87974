import re
from pathlib import Path
from typing import Union

import click

_MD_SUFFIX_RE = re.compile(r"\.md$", re.IGNORECASE)


def display_path(path: Union[str, Path]) -> str:
    """Printable path; bytes that are not UTF-8 show up as U+FFFD."""
    return click.format_filename(path)


def derive_title(input_path: Union[str, Path]) -> str:
    """Final path component, extension included."""
    return display_path(Path(input_path).name)


def derive_output_path(input_path: Union[str, Path]) -> Path:
    """
    Output path next to the input.
    A trailing .md (any case) becomes .html; anything else gets .html
    appended so the source is never the target.
    """
    raw = str(input_path)
    if _MD_SUFFIX_RE.search(raw):
        return Path(_MD_SUFFIX_RE.sub(".html", raw))
    return Path(raw + ".html")
