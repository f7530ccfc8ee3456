"""Error hierarchy for palette-gen.

Every public entry point either returns a complete result or raises a
PaletteError subclass. `kind` is a stable tag callers can switch on.
"""

SUPPORTED_COLOR_FORMATS = [
    "named colour (e.g. 'red', 'navy')",
    "hex ('#3498DB' or '3498DB')",
    'rgb(r, g, b)',
    'hsl(h, s%, l%)',
]


class PaletteError(Exception):
    """Base class for all palette-gen errors."""

    kind = 'palette_error'


class InvalidColorFormat(PaletteError, ValueError):
    kind = 'invalid_color_format'

    def __init__(self, value: str):
        self.value = value
        self.supported = list(SUPPORTED_COLOR_FORMATS)
        super().__init__(f'Invalid color format: {value!r}. Supported formats: {"; ".join(self.supported)}')


class UnsupportedExportFormat(PaletteError, ValueError):
    kind = 'unsupported_export_format'

    def __init__(self, fmt: str, available: list[str]):
        self.format = fmt
        self.available = sorted(available)
        super().__init__(f'Unsupported export format: {fmt!r}. Available: {", ".join(self.available)}')
