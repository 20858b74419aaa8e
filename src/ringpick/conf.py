"""Application settings and config persistence for ringpick.

Config is stored at ~/.config/ringpick/config.json (XDG-compliant).

Usage:
    from ringpick.conf import settings

    settings.ring_config    # SimpleRingConfig (track width, tracks, sectors)
    settings.last_color     # last picked RGB or None

    # Low-level config access
    from ringpick.conf import load_config, save_config
"""
from __future__ import annotations

import json
import logging
import os
from typing import Optional

from .core.models import RGB, ConfigError, SimpleRingConfig

log = logging.getLogger(__name__)

# =========================================================================
# Config file location (XDG-compliant)
# =========================================================================

_XDG_CONFIG = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
CONFIG_DIR = os.path.join(_XDG_CONFIG, 'ringpick')
CONFIG_PATH = os.path.join(CONFIG_DIR, 'config.json')


# =========================================================================
# Low-level config persistence
# =========================================================================

def load_config() -> dict:
    """Load user config from disk. Returns empty dict on missing/corrupt file."""
    try:
        with open(CONFIG_PATH, 'r') as f:
            data = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(config: dict):
    """Save user config to disk."""
    os.makedirs(CONFIG_DIR, exist_ok=True)
    with open(CONFIG_PATH, 'w') as f:
        json.dump(config, f, indent=2)


# =========================================================================
# Ring picker settings
# =========================================================================

def get_ring_config() -> SimpleRingConfig:
    """Get saved ring settings, falling back to defaults on bad values."""
    raw = load_config().get('ring', {})
    default = SimpleRingConfig()
    if not isinstance(raw, dict):
        return default
    try:
        return SimpleRingConfig(
            color_track_width=float(raw.get('color_track_width', default.color_track_width)),
            tracks_count=int(raw.get('tracks_count', default.tracks_count)),
            sectors_count=int(raw.get('sectors_count', default.sectors_count)),
        ).validate()
    except (TypeError, ValueError) as e:
        # ConfigError is a ValueError
        log.warning("Ignoring invalid ring config %r: %s", raw, e)
        return default


def save_ring_config(ring: SimpleRingConfig):
    """Persist ring settings. Raises ConfigError for invalid values."""
    ring.validate()
    config = load_config()
    config['ring'] = {
        'color_track_width': ring.color_track_width,
        'tracks_count': ring.tracks_count,
        'sectors_count': ring.sectors_count,
    }
    save_config(config)


# =========================================================================
# Last picked color
# =========================================================================

def get_last_color() -> Optional[RGB]:
    """Get the last picked color. Returns None if unset or unreadable."""
    value = load_config().get('last_color')
    if not isinstance(value, str):
        return None
    try:
        return RGB.from_hex(value)
    except ValueError:
        return None


def save_last_color(color: RGB):
    """Persist the last picked color as 'RRGGBB'."""
    config = load_config()
    config['last_color'] = color.to_hex()
    save_config(config)


class Settings:
    """Read-through view of the persisted settings."""

    @property
    def ring_config(self) -> SimpleRingConfig:
        return get_ring_config()

    @property
    def last_color(self) -> Optional[RGB]:
        return get_last_color()


settings = Settings()

__all__ = [
    'CONFIG_DIR',
    'CONFIG_PATH',
    'ConfigError',
    'Settings',
    'get_last_color',
    'get_ring_config',
    'load_config',
    'save_config',
    'save_last_color',
    'save_ring_config',
    'settings',
]
