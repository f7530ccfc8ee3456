"""Colour-blindness simulation report: original palette, then the palette
as seen with protanopia, deuteranopia, tritanopia and achromatopsia.

Example:
    palette-gen colorblind '#3498db' --style triadic
"""

from palette_gen.core.colorblind import simulate_all
from palette_gen.core.types import Exporter, ExportRequest

exporter = Exporter(
    name='colorblind',
    help='Palette as simulated for each colour-vision deficiency.',
)


def _section(title: str, colours: list[str]) -> list[str]:
    return [f'{title}:', *(f'  {c}' for c in colours)]


@exporter.render
def render(request: ExportRequest) -> str:
    lines = ['Color Blindness Simulation', '']
    lines.extend(_section('Original', request.colors))
    for cb_type, simulated in simulate_all(request.colors).items():
        lines.append('')
        lines.extend(_section(cb_type.value.capitalize(), simulated))
    return '\n'.join(lines)
