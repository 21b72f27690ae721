"""sortjson package root."""

from sortjson.comments import detect_jsonc, strip_comments
from sortjson.config import load_config, resolve_file_config
from sortjson.formatting import format_json
from sortjson.sort import sort_keys, sort_keys_from_depth, sort_keys_shallow

__all__ = [
    "__version__",
    "detect_jsonc",
    "format_json",
    "load_config",
    "resolve_file_config",
    "sort_keys",
    "sort_keys_from_depth",
    "sort_keys_shallow",
    "strip_comments",
]

__version__ = "1.2.0"
