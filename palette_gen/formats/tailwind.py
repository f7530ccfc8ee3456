"""Tailwind config snippet with the palette under colors.custom.

Keys are 1..N, so classes read bg-custom-1, text-custom-3 and so on.
Merge into tailwind.config.js.

Example:
    palette-gen tailwind '#3498db' --style tetradic
"""

from palette_gen.core.types import Exporter, ExportRequest

exporter = Exporter(
    name='tailwind',
    help='tailwind.config.js snippet (theme.extend.colors.custom).',
)


@exporter.render
def render(request: ExportRequest) -> str:
    entries = ',\n'.join(f"          {i}: '{c}'" for i, c in enumerate(request.colors, start=1))
    return (
        'module.exports = {\n'
        '  theme: {\n'
        '    extend: {\n'
        '      colors: {\n'
        '        custom: {\n'
        f'{entries}\n'
        '        }\n'
        '      }\n'
        '    }\n'
        '  }\n'
        '};'
    )
