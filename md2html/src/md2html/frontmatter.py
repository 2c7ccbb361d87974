import datetime as dt
import logging
import re
from typing import Optional, Tuple

import yaml
from pydantic import ValidationError as PydanticValidationError

from .errors import FrontmatterError
from .models.frontmatter import Author, Frontmatter

logger = logging.getLogger(__name__)

# Same pattern the page script applies before handing the block to js-yaml
_FRONTMATTER_RE = re.compile(r"^---\r?\n(.*?)\r?\n---\r?\n", re.DOTALL)


def split_frontmatter(text: str) -> Tuple[Optional[str], str]:
    """
    Separate a leading frontmatter block from the document body.
    Returns (block, body); block is None when the document has none.
    """
    if not (text.startswith("---\n") or text.startswith("---\r\n")):
        return None, text
    m = _FRONTMATTER_RE.match(text)
    if not m:
        return None, text
    return m.group(1), text[m.end():]


def parse_frontmatter(block: str) -> Frontmatter:
    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as e:
        raise FrontmatterError(f"Invalid frontmatter YAML: {e}")

    if not isinstance(data, dict):
        raise FrontmatterError("Frontmatter must be a mapping.", {"type": type(data).__name__})

    try:
        return Frontmatter.model_validate(data)
    except PydanticValidationError as e:
        raise FrontmatterError(
            f"Unsupported frontmatter field types: {e.error_count()} error(s)",
            {"stage": "validate", "errors": e.errors(include_url=False)},
        )


def extract_frontmatter(text: str) -> Tuple[Optional[Frontmatter], str]:
    """
    Parse the leading block of a document and strip it.
    A malformed block is logged and still stripped; the body renders without a header.
    """
    block, body = split_frontmatter(text)
    if block is None:
        return None, body
    try:
        return parse_frontmatter(block), body
    except FrontmatterError as e:
        if e.details.get("stage") == "validate":
            # Valid YAML the page still renders, only the typed inspection gave up
            logger.warning(f"Skipped build-time frontmatter inspection: {e.message}")
        else:
            logger.warning(f"Failed to parse YAML frontmatter: {e.message}")
        return None, body


def _format_date(value) -> str:
    if isinstance(value, dt.datetime):
        # The page prints the UTC calendar day
        if value.tzinfo is not None:
            value = value.astimezone(dt.timezone.utc)
        return value.date().isoformat()
    if isinstance(value, dt.date):
        return value.isoformat()
    return str(value)


def render_header(frontmatter: Frontmatter) -> str:
    """Header block the page prepends to the rendered markdown."""
    parts = ['<div class="frontmatter-header">']
    if frontmatter.thumbnail:
        parts.append(f'<img src="{frontmatter.thumbnail}" alt="Thumbnail">')
    if frontmatter.title:
        parts.append(f"<h1>{frontmatter.title}</h1>")
    if frontmatter.date:
        parts.append(f"<p><strong>Date:</strong> {_format_date(frontmatter.date)}</p>")
    # An empty list still produces the heading, like the page script
    if frontmatter.authors is not None and frontmatter.authors != "":
        parts.append("<p><strong>Authors:</strong></p><ul>")
        for author in frontmatter.author_list():
            if isinstance(author, Author):
                name = author.name or "Unknown"
                affil = ""
                if author.affiliations is not None and author.affiliations != "":
                    affil = f" <em>({', '.join(author.affiliation_list())})</em>"
                parts.append(f"<li>{name}{affil}</li>")
            else:
                parts.append(f"<li>{author}</li>")
        parts.append("</ul>")
    parts.append("<hr></div>")
    return "".join(parts)
