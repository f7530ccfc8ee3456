"""Serialise a palette into one of the registered export formats."""

import logging

from palette_gen import registry
from palette_gen.core.errors import UnsupportedExportFormat
from palette_gen.core.types import ExportFormat, ExportRequest, Style

logger = logging.getLogger(__name__)


def export_palette(
    colours: list[str],
    fmt: ExportFormat | str,
    base_color: str | None = None,
    style: Style | str | None = None,
) -> str:
    """Return the palette rendered as `fmt`. Pure formatting, no I/O.

    Raises UnsupportedExportFormat for a name with no registered format.
    """
    try:
        exporter = registry.get(fmt)
    except KeyError:
        raise UnsupportedExportFormat(str(fmt), list(registry.all_formats())) from None

    style_name = style.value if isinstance(style, Style) else style
    request = ExportRequest(colors=list(colours), base_color=base_color, style=style_name)
    logger.debug('exporting %d colours as %s', len(request.colors), exporter.name)
    return exporter.export(request)
