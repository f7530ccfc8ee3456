"""CSS custom properties, one per colour, numbered from 1.

Output:
    --color-1: #3498DB;
    --color-2: #34DBD5;
    ...

Paste inside a :root { } block or any selector.

Example:
    palette-gen css '#3498db' --style analogous
"""

from palette_gen.core.types import Exporter, ExportRequest

exporter = Exporter(
    name='css',
    help='CSS custom properties (--color-1 ... --color-N).',
)


@exporter.render
def render(request: ExportRequest) -> str:
    return '\n'.join(f'--color-{i}: {c};' for i, c in enumerate(request.colors, start=1))
