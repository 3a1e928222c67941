"""Overlay color management.

Provides centralized access to overlay colors from configuration, with
a built-in palette as fallback when the YAML file is missing or broken.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Union
import yaml

from .graphics.painter import Color, DARK_BLUE, DARK_MAGENTA, RED, WHITE, YELLOW

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "overlay_colors.yaml"


class ColorManager:
    """Manages overlay colors from external configuration.

    Loads colors from overlay_colors.yaml and provides the pen/brush
    colors for each overlay layer. Unknown or malformed entries fall back
    to the host palette.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._config: Dict = {}
        self._load_config()

    def _load_config(self):
        """Load color configuration from YAML file."""
        try:
            if not self.config_path.exists():
                logger.warning(
                    f"Overlay colors config not found at {self.config_path}, "
                    "using defaults"
                )
                self._config = self._get_default_config()
                return

            with open(self.config_path, "r") as f:
                config = yaml.safe_load(f) or {}

            problem = self._validate_config(config)
            if problem:
                logger.warning(
                    f"Invalid overlay colors config at {self.config_path}: {problem}; "
                    "using defaults"
                )
                self._config = self._get_default_config()
                return

            self._config = config
            logger.debug(f"Loaded overlay colors from {self.config_path}")

        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load overlay colors: {e}")
            self._config = self._get_default_config()

    @staticmethod
    def _validate_config(config) -> Optional[str]:
        """Describe the first structural problem in a loaded config, if any."""
        if not isinstance(config, dict):
            return f"expected a mapping at top level, got {type(config).__name__}"
        for section in ("colors", "alpha"):
            value = config.get(section)
            if value is not None and not isinstance(value, dict):
                return f"'{section}' must be a mapping, got {type(value).__name__}"
        return None

    def _get_default_config(self) -> Dict:
        """Get default color configuration as fallback."""
        return {
            "colors": {
                "region": YELLOW.to_hex(),
                "bin_outline": WHITE.to_hex(),
                "cell_outline": WHITE.to_hex(),
                "instance": DARK_BLUE.to_hex(),
                "filler": DARK_MAGENTA.to_hex(),
                "selected": YELLOW.to_hex(),
                "net": YELLOW.to_hex(),
                "force": RED.to_hex(),
            },
            "alpha": {
                "bins": 180,
                "cells": 180,
            },
        }

    def get_color(self, element: str) -> Color:
        """Get the color for an overlay element.

        Args:
            element: Element name (e.g., "instance", "filler", "force")

        Returns:
            Color, opaque unless the hex value carries an alpha channel
        """
        value = (self._config.get("colors") or {}).get(element)
        if value is None:
            value = self._get_default_config()["colors"].get(element, WHITE.to_hex())

        try:
            return Color.from_hex(str(value))
        except ValueError as e:
            logger.warning(f"Bad color for '{element}': {e}; using default")
            return Color.from_hex(self._get_default_config()["colors"].get(element, "#ffffff"))

    def get_alpha(self, element: str) -> int:
        """Get the fill alpha (0-255) for "bins" or "cells"."""
        value = (self._config.get("alpha") or {}).get(element, 180)
        try:
            return max(0, min(255, int(value)))
        except (TypeError, ValueError):
            logger.warning(f"Bad alpha for '{element}': {value!r}; using 180")
            return 180

    def get_all_colors(self) -> Dict[str, Color]:
        """Get every configured overlay color."""
        names = set(self._get_default_config()["colors"]) | set(self._config.get("colors") or {})
        return {name: self.get_color(name) for name in sorted(names)}

    def reload(self):
        """Reload configuration from file."""
        self._load_config()


# Global instance
_color_manager = None


def get_color_manager() -> ColorManager:
    """Get the global ColorManager instance.

    Returns:
        ColorManager loaded from the packaged overlay_colors.yaml
    """
    global _color_manager
    if _color_manager is None:
        _color_manager = ColorManager()
    return _color_manager
