"""Plain hex list, one colour per line.

Example:
    palette-gen text coral --style complementary
"""

from palette_gen.core.types import Exporter, ExportRequest

exporter = Exporter(
    name='text',
    help='Plain hex list, one colour per line.',
)


@exporter.render
def render(request: ExportRequest) -> str:
    return '\n'.join(request.colors)
