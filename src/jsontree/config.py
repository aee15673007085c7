"""
Global Configuration and Layout Defaults.

Centralizes the constants that make generated graphs reproducible (layout
spacing, node box size, viewport hints) and loads optional overrides from
.jsontree/config.yaml and JSONTREE_* environment variables.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

# --- Layout ---
# Horizontal distance between tree levels
LAYOUT_X_SPACING = 220

# Vertical distance between consecutive siblings
LAYOUT_Y_SPACING = 120

# Rendered node box, used to aim viewport centering at the middle of a node
NODE_WIDTH = 160
NODE_HEIGHT = 48

# --- Viewport hints ---
SEARCH_ZOOM = 1.3
FIT_VIEW_PADDING = 0.2

# --- Safety Limits ---
# Inputs larger than this are refused by the CLI before parsing
MAX_INPUT_BYTES = 10 * 1024 * 1024

# Label used for the root node of every generation
ROOT_LABEL = "root"

# Minimap colors by node kind
KIND_COLORS: Dict[str, str] = {
    "object": "#6c5ce7",
    "array": "#00b894",
    "primitive": "#fdcb6e",
}

DEFAULT_CONFIG_PATH = Path(".jsontree/config.yaml")


class JsonTreeConfig(BaseModel):
    """Tunable settings, defaults mirror the module constants."""
    x_spacing: int = LAYOUT_X_SPACING
    y_spacing: int = LAYOUT_Y_SPACING
    node_width: int = NODE_WIDTH
    node_height: int = NODE_HEIGHT
    search_zoom: float = SEARCH_ZOOM
    fit_view_padding: float = FIT_VIEW_PADDING
    max_input_bytes: int = MAX_INPUT_BYTES


# env var -> config field
ENV_OVERRIDES: Dict[str, str] = {
    "JSONTREE_X_SPACING": "x_spacing",
    "JSONTREE_Y_SPACING": "y_spacing",
    "JSONTREE_NODE_WIDTH": "node_width",
    "JSONTREE_NODE_HEIGHT": "node_height",
    "JSONTREE_SEARCH_ZOOM": "search_zoom",
    "JSONTREE_FIT_VIEW_PADDING": "fit_view_padding",
    "JSONTREE_MAX_INPUT_BYTES": "max_input_bytes",
}


def load_config(config_path: Path | None = None) -> JsonTreeConfig:
    """
    Load configuration.

    Precedence (lowest to highest): defaults, YAML file, environment.
    A missing file is not an error; an unreadable or invalid one is logged
    and ignored.
    """
    path = config_path or DEFAULT_CONFIG_PATH
    data: Dict[str, Any] = {}

    if path.exists():
        try:
            with open(path, "r") as f:
                loaded = yaml.safe_load(f) or {}
            if isinstance(loaded, dict):
                data.update(loaded.get("layout", {}) or {})
                data.update(loaded.get("viewport", {}) or {})
                data.update(loaded.get("limits", {}) or {})
            else:
                logger.warning(f"Ignoring config {path}: expected a mapping")
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to read config {path}: {e}")

    for env_key, field_name in ENV_OVERRIDES.items():
        value = os.environ.get(env_key)
        if value is not None:
            data[field_name] = value

    try:
        return JsonTreeConfig(**data)
    except ValidationError as e:
        logger.warning(f"Invalid configuration, using defaults: {e}")
        return JsonTreeConfig()
