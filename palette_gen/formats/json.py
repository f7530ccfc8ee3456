"""JSON document with base colour, style, colours and a UTC timestamp.

Keys: baseColor, style, colors, generatedAt (ISO-8601, millisecond
precision, 'Z' suffix). Pretty-printed with a 2-space indent.
baseColor and style are null when not supplied.

Example:
    palette-gen json '#3498db' --style triadic
"""

import json
from datetime import datetime, timezone

from palette_gen.core.types import Exporter, ExportRequest

exporter = Exporter(
    name='json',
    help='JSON document: baseColor, style, colors, generatedAt.',
)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


@exporter.render
def render(request: ExportRequest) -> str:
    doc = {
        'baseColor': request.base_color,
        'style': request.style,
        'colors': request.colors,
        'generatedAt': _timestamp(),
    }
    return json.dumps(doc, indent=2)
