"""
HexPrintFile - Settings Loading

Load display defaults from a JSON file.
"""
import json
from pathlib import Path
from typing import Any, Dict

from hexprint.errors import CommandSyntaxError

# key -> expected type
SETTINGS_KEYS = {
    'chunk_size': int,
    'extended': bool,
    'index_from_one': bool,
}


def load_settings(path: str) -> Dict[str, Any]:
    """
    Load display defaults.

    Expected JSON format (every key optional):
    {
        "chunk_size": 16,
        "extended": false,
        "index_from_one": false
    }

    Raises:
        CommandSyntaxError: File unreadable, not a JSON object, unknown key or wrong type
    """
    try:
        data = json.loads(Path(path).read_text())
    except OSError as e:
        raise CommandSyntaxError(f"Cannot read config file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CommandSyntaxError(f"Invalid JSON in config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise CommandSyntaxError(f"Config file {path} must contain a JSON object")

    settings = {}
    for key, value in data.items():
        expected = SETTINGS_KEYS.get(key)
        if expected is None:
            raise CommandSyntaxError(f"Unknown config key: {key}")
        # bool is a subclass of int, so reject it explicitly for chunk_size
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise CommandSyntaxError(f"Config key {key} must be {expected.__name__}")
        settings[key] = value

    return settings
