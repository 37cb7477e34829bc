# passgauge/config.py
"""
Simple settings persistence for PassGauge.
Settings saved as JSON in %APPDATA%/PassGauge/config.json (Windows) or ~/.passgauge/config.json (fallback).
Set PASSGAUGE_CONFIG to point at another file.
"""

import os
import json
import logging
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "debounce_ms": 50,
    "random_length": 16,
    "passphrase_words": 4,
    "max_random_length": 1024,
    "max_passphrase_words": 64,
    "estimator_max_length": 72,
    "log_level": "WARNING",
}

def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "PassGauge")
    return os.path.join(os.path.expanduser("~"), ".passgauge")

def config_path() -> str:
    override = os.getenv("PASSGAUGE_CONFIG")
    if override:
        return override
    return os.path.join(_appdata_dir(), "config.json")

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    out.update(data)
    return out

def save_config(cfg: Dict[str, Any], path: Optional[str] = None) -> str:
    p = path or config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)
    return p
