import os
import logging
from pathlib import Path

from .models.assets import TemplateAssets

# Plain .env reader, values already in the environment win.

logger = logging.getLogger(__name__)

_ASSET_ENV_VARS = {
    "markdown_css_light": "MD2HTML_MARKDOWN_CSS_LIGHT",
    "markdown_css_dark": "MD2HTML_MARKDOWN_CSS_DARK",
    "marked_js": "MD2HTML_MARKED_JS",
    "js_yaml_js": "MD2HTML_JS_YAML_JS",
    "mermaid_js": "MD2HTML_MERMAID_JS",
}

def load_env_file(path: str = ".env"):
    """
    Load environment variables from a .env file into os.environ.
    Does not override existing strings.
    """
    p = Path(path)
    if not p.exists():
        return

    try:
        with open(p) as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith('#'):
                    continue
                if '=' in line:
                    key, val = line.split('=', 1)
                    key = key.strip()
                    val = val.strip()
                    if key not in os.environ:
                        os.environ[key] = val
    except OSError as e:
        logger.warning(f"Failed to load .env: {e}")

# Load on import
load_env_file()

def get_log_level() -> int:
    """Log level from MD2HTML_LOG_LEVEL, WARNING when unset or unknown."""
    name = (os.environ.get("MD2HTML_LOG_LEVEL") or "").strip().upper()
    level = logging.getLevelName(name) if name else None
    if not isinstance(level, int):
        return logging.WARNING
    return level

def get_assets() -> TemplateAssets:
    """CDN addresses for the rendered page, with environment overrides."""
    overrides = {}
    for field, env_var in _ASSET_ENV_VARS.items():
        value = (os.environ.get(env_var) or "").strip()
        if value:
            overrides[field] = value
    return TemplateAssets(**overrides)
