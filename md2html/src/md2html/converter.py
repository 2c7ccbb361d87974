import logging
from pathlib import Path
from typing import Optional, Union

from .errors import ConversionError, InputNotFoundError
from .export import html_export
from .export.paths import derive_output_path, derive_title, display_path
from .export.payload import encode_payload
from .frontmatter import extract_frontmatter
from .models.assets import TemplateAssets

logger = logging.getLogger(__name__)


def _inspect(path: Path, data: bytes) -> None:
    text = data.decode("utf-8", errors="replace")
    frontmatter, _ = extract_frontmatter(text)
    if frontmatter is None:
        logger.debug(f"No frontmatter header in {display_path(path)}")
        return
    logger.info(
        f"Frontmatter in {display_path(path)}: title={frontmatter.title!r}, "
        f"authors={len(frontmatter.author_list())}"
    )


def convert(input_path: Union[str, Path], assets: Optional[TemplateAssets] = None) -> Path:
    """
    Convert one markdown file into a self-rendering HTML page next to it.
    Returns the output path. Raises InputNotFoundError when the input is
    missing and ConversionError when reading or writing fails.
    """
    path = Path(input_path)
    if not path.exists():
        raise InputNotFoundError(input_path)

    try:
        data = path.read_bytes()
    except OSError as e:
        raise ConversionError(input_path, e.strerror or str(e))

    payload = encode_payload(data)
    title = derive_title(path)
    output_path = derive_output_path(input_path)

    try:
        document = html_export.render_html(title, payload, assets)
        html_export.export_html(document, output_path)
    except OSError as e:
        raise ConversionError(input_path, e.strerror or str(e))
    except UnicodeError as e:
        raise ConversionError(input_path, f"cannot encode page: {e}")

    _inspect(path, data)
    logger.info(f"Converted {display_path(path)} ({len(data)} bytes) -> {display_path(output_path)}")
    return output_path
