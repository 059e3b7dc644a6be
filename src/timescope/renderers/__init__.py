"""Pure rendering functions: dates -> HTML fragments.

Renderers take plain data, build a formatter for it and return an HTML
fragment string (no ``<html>``/``<body>``). No I/O, no side effects.

Public API:
  - axis_labels: build_axis_labels_html, axis_label_rows
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
