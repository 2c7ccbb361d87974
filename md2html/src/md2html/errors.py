import json
import traceback
import click

class Md2HtmlError(Exception):
    """Base exception for md2html"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

class InputNotFoundError(Md2HtmlError):
    """Input document does not exist"""
    def __init__(self, path):
        super().__init__(f"File not found: {click.format_filename(path)}", {"path": str(path)})

class ConversionError(Md2HtmlError):
    """Reading the input or writing the output failed"""
    def __init__(self, path, reason: str):
        super().__init__(f"Failed to convert {click.format_filename(path)}: {reason}", {"path": str(path), "reason": reason})

class FrontmatterError(Md2HtmlError):
    """Leading YAML block could not be parsed"""
    pass

def format_error(e: Exception) -> str:
    """Format exception as a JSON error envelope."""

    if isinstance(e, Md2HtmlError):
        error_type = e.__class__.__name__
        message = e.message
        details = e.details
    else:
        error_type = "UnknownError"
        message = str(e)
        details = {
            "traceback": traceback.format_exc().splitlines()
        }

    payload = {
        "ok": False,
        "error": {
            "type": error_type,
            "message": message,
            "details": details
        },
        "meta": {
            "version": 1
        }
    }

    return json.dumps(payload, indent=2)
