"""Pure rendering functions: report data -> HTML strings (the presentation port).

All renderers follow the same pattern:
  - Input: dataclasses from ``analysis/`` (HarvestReport and its parts)
  - Output: str (HTML fragment, not a full page)
  - No side effects, no I/O, no Prefect decorators

Used by flows/build.py which orchestrates the rendering pipeline.

Public API:
  - status_cards: build_status_cards_html
  - charts: build_chart_config, build_day_chart_html
  - day_info: build_day_info_html
  - outlook: build_outlook_html
  - notification: build_notification_html
  - date_utils: format_short_day, UNAVAILABLE

Adding a renderer (UI module)
-----------------------------
1. Create ``renderers/{name}.py`` with a build function::

       from harvest_planner.renderers import render_template

       def build_mywidget_html(report: HarvestReport) -> str:
           rows = [...]
           return render_template("mywidget.html.j2", rows=rows)

2. Create a Jinja2 template in ``templates/{name}.html.j2``.
   Templates produce HTML fragments (no <html>/<body> tags).

3. Wire into ``flows/build.py`` and add the placeholder in ``base.html.j2``.

4. Add tests: call your build function with sample data and assert
   the returned HTML contains expected content.
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
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
