# statblock/config.py
import os
import json
import logging
from enum import Enum

from dotenv import load_dotenv

from statblock.exceptions import UnknownLayoutError

load_dotenv()  # Automatically load .env in project root

logger = logging.getLogger(__name__)

CONFIG_DIR = os.path.expanduser("~/.statblock13a_config")
SETTINGS_PATH = os.path.join(CONFIG_DIR, "settings.json")

DEFAULT_MARKDOWN_EXTENSIONS = ["attr_list", "md_in_html"]


class Layout(Enum):
    # Role/initiative/defense lines as successive top-level blocks
    FLAT = "flat"
    # Role/initiative/defense lines inside one "properties" group
    GROUPED = "grouped"

    @classmethod
    def parse(cls, value) -> "Layout":
        if isinstance(value, Layout):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownLayoutError(value) from None


def _load_settings_file() -> dict:
    if not os.path.exists(SETTINGS_PATH):
        return {}
    with open(SETTINGS_PATH, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            logger.warning("Ignoring %s: %s", SETTINGS_PATH, exc)
            return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a JSON object", SETTINGS_PATH)
        return {}
    return data


def _setting(key: str, env_var: str):
    # 1. Try settings.json
    settings = _load_settings_file()
    if key in settings:
        return settings[key]

    # 2. Try .env fallback
    return os.getenv(env_var)


def get_layout() -> Layout:
    value = _setting("layout", "STATBLOCK_LAYOUT")
    if value in (None, ""):
        return Layout.FLAT
    return Layout.parse(value)


def get_concurrent() -> bool:
    value = _setting("concurrent", "STATBLOCK_CONCURRENT")
    if isinstance(value, bool):
        return value
    return str(value or "").strip().lower() in ("1", "true", "yes", "on")


def get_markdown_extensions() -> list:
    value = _setting("markdown_extensions", "STATBLOCK_MARKDOWN_EXTENSIONS")
    if value is None:
        return list(DEFAULT_MARKDOWN_EXTENSIONS)
    if isinstance(value, str):
        return [ext.strip() for ext in value.split(",") if ext.strip()]
    return list(value)


def save_settings(**settings):
    """Merge *settings* into settings.json. Layouts are stored by name."""
    current = _load_settings_file()
    for key, value in settings.items():
        current[key] = value.value if isinstance(value, Enum) else value
    os.makedirs(CONFIG_DIR, exist_ok=True)
    with open(SETTINGS_PATH, "w") as f:
        json.dump(current, f, indent=2)
    logger.debug("Saved statblock settings to %s", SETTINGS_PATH)
