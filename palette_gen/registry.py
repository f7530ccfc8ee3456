"""Export format registry.

Every module in palette_gen/formats/ that defines a module-level
`exporter` (an Exporter) becomes an export format under `exporter.name`.
The module docstring doubles as the format's `palette-gen help <name>` text.

pkgutil finds nothing inside frozen binaries, so FORMAT_MODULES below is
used as the module list there.
"""

import importlib
import pkgutil

from palette_gen.core.types import Exporter, ExportFormat

_exporters: dict[str, Exporter] = {}
_docs: dict[str, str] = {}

FORMAT_MODULES = [f.value for f in ExportFormat]


def _module_names() -> list[str]:
    import palette_gen.formats as pkg

    names = [name for _finder, name, _ispkg in pkgutil.iter_modules(pkg.__path__) if not name.startswith('_')]
    return names or FORMAT_MODULES


def discover() -> dict[str, Exporter]:
    """Import the format modules once and return {name: Exporter}."""
    if _exporters:
        return _exporters

    for modname in _module_names():
        module = importlib.import_module(f'palette_gen.formats.{modname}')
        exp = getattr(module, 'exporter', None)
        if not isinstance(exp, Exporter):
            continue
        _exporters[exp.name] = exp
        _docs[exp.name] = (module.__doc__ or '').strip()

    return _exporters


def normalize(name: ExportFormat | str) -> str:
    """'JSON', ' css ' and ExportFormat.CSS all map to their registry key."""
    if isinstance(name, ExportFormat):
        return name.value
    return str(name).strip().lower()


def get(name: ExportFormat | str) -> Exporter:
    """Exporter for `name`. Raises KeyError listing the available formats."""
    reg = discover()
    key = normalize(name)
    if key not in reg:
        raise KeyError(f'Unknown export format: {name}. Available: {", ".join(sorted(reg))}')
    return reg[key]


def docs(name: ExportFormat | str) -> str:
    """Module docstring of a registered format ('' when it has none)."""
    get(name)
    return _docs.get(normalize(name), '')


def all_formats() -> dict[str, Exporter]:
    return discover()
