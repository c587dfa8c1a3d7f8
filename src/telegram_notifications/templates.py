"""Caption templates.

Templates live in TEMPLATES_DIR as `<name>.yaml` (text under a `content` key)
or `<name>.md`, and are filled with str.format_map.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .config import get_settings
from .exceptions import TemplateNotFound
from .log import get_logger

logger = get_logger("templates")


def load_template(name: str) -> str:
    base = Path(get_settings().TEMPLATES_DIR)

    # Prioritize .yaml for structured templates
    yaml_path = base / f"{name}.yaml"
    if yaml_path.exists():
        with open(yaml_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
            return data.get("content", "")

    md_path = base / f"{name}.md"
    if md_path.exists():
        with open(md_path, "r", encoding="utf-8") as f:
            return f.read()

    raise TemplateNotFound(f"Template {name} not found as .yaml or .md in {base}")


def render(name: str, data: Optional[Dict[str, Any]] = None, merge_data: Optional[Dict[str, Any]] = None) -> str:
    """
    Render a template with `data`; keys in `merge_data` take precedence.
    Missing placeholders raise KeyError.
    """
    context = {**(data or {}), **(merge_data or {})}
    logger.debug(f"Rendering template {name} with keys {sorted(context)}")
    return load_template(name).format_map(context)
