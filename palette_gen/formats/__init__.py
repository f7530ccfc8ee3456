"""Auto-discovery of export format modules.

Every .py file in this package that defines an `exporter` object is
auto-registered by palette_gen.registry.discover().

The explicit imports below ensure frozen builds include these modules.
Without them, pkgutil.iter_modules cannot find the format files at runtime.
"""

# Frozen-build hidden imports, keep this list in sync with format modules
import palette_gen.formats.accessibility as _accessibility  # noqa: F401
import palette_gen.formats.colorblind as _colorblind  # noqa: F401
import palette_gen.formats.css as _css  # noqa: F401
import palette_gen.formats.json as _json  # noqa: F401
import palette_gen.formats.scss as _scss  # noqa: F401
import palette_gen.formats.tailwind as _tailwind  # noqa: F401
import palette_gen.formats.text as _text  # noqa: F401
