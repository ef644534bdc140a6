import json
import logging
import os

logger = logging.getLogger("pagetable.config")

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "pagetable")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

# default settings
PAGE_SIZE_DEFAULT = 25
MIDDLE_BUTTON_COUNT_DEFAULT = 10


def _positive_int(value, minimum):
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value >= minimum else None


def load_config():
    cfg = {
        "PAGE_SIZE": PAGE_SIZE_DEFAULT,
        "MIDDLE_BUTTON_COUNT": MIDDLE_BUTTON_COUNT_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", CONFIG_JSON, exc)
        return cfg

    if not isinstance(data, dict):
        return cfg

    pagination = data.get("pagination")
    if not isinstance(pagination, dict):
        return cfg

    page_size = _positive_int(pagination.get("page_size"), 1)
    if page_size is not None:
        cfg["PAGE_SIZE"] = page_size
    middle = _positive_int(pagination.get("middle_button_count"), 1)
    if middle is not None:
        cfg["MIDDLE_BUTTON_COUNT"] = middle

    return cfg
