"""Declaration templates.

Templates are Jinja2 source. They receive ``classes`` (the ordered class
names) and ``source_path``, and may use the ``ts_key`` filter to quote
names that are not valid TypeScript identifiers.
"""

from __future__ import annotations

import json
import re

__all__ = ["DEFAULT_TEMPLATE", "ts_key"]

DEFAULT_TEMPLATE = """\
export type Styles = {
{%- for name in classes %}
  {{ name | ts_key }}: string;
{%- endfor %}
};

export type ClassNames = keyof Styles;

declare const styles: Styles;

export default styles;
"""

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def ts_key(name: str) -> str:
    """Render ``name`` as a TypeScript property key, quoting it if needed."""
    if _IDENTIFIER_RE.match(name):
        return name
    return json.dumps(name)
