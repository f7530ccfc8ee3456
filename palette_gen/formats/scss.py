"""SCSS variables, one per colour, numbered from 1.

Output:
    $color-1: #3498DB;
    $color-2: #34DBD5;

Example:
    palette-gen scss '#3498db' --style monochromatic -o _palette.scss
"""

from palette_gen.core.types import Exporter, ExportRequest

exporter = Exporter(
    name='scss',
    help='SCSS variables ($color-1 ... $color-N).',
)


@exporter.render
def render(request: ExportRequest) -> str:
    return '\n'.join(f'$color-{i}: {c};' for i, c in enumerate(request.colors, start=1))
