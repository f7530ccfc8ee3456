"""palette-gen — Colour palettes from a base colour, with WCAG and colour-blindness checks.

Usage: palette-gen <format> [color] [options]

Export formats are auto-discovered from palette_gen/formats/.
Each format module's docstring is its documentation.
Run `palette-gen help <format>` for full module docs.

Colours may be names (coral), hex (#3498db or 3498db), rgb(52, 152, 219)
or hsl(204, 70%, 53%). Omit the colour to start from a random one.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, palette-gen looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import logging
import sys
from pathlib import Path

from palette_gen import __version__, registry
from palette_gen.core.accessibility import WCAG_THRESHOLDS, get_contrast_ratio, passes_wcag
from palette_gen.core.config import Settings, load_settings
from palette_gen.core.convert import parse_color, random_hex_color
from palette_gen.core.errors import PaletteError
from palette_gen.core.palette import (
    STYLE_DESCRIPTIONS,
    generate_all_styles,
    generate_random_palette,
    generate_related_palette,
)
from palette_gen.core.rng import NumpyRandom
from palette_gen.core.swatch import render_swatch
from palette_gen.core.types import Style
from palette_gen.export import export_palette

logger = logging.getLogger('palette_gen')


def _short_doc(name: str, fallback: str) -> str:
    doc = registry.docs(name)
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    formats = registry.all_formats()

    epilog = (
        'Examples:\n'
        "  palette-gen css '#3498db' --style complementary\n"
        "  palette-gen json coral -s triadic -o palette.json\n"
        "  palette-gen accessibility 'rgb(52, 152, 219)' -s monochromatic\n"
        "  palette-gen colorblind 'hsl(204, 70%, 53%)'\n"
        "  palette-gen text navy --jitter --seed 7 --swatch navy.png\n"
        '  palette-gen styles coral\n'
        '  palette-gen random -n 8 --seed 42\n'
        "  palette-gen contrast '#ffffff' '#3498db'\n"
        '  palette-gen help accessibility\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  PALETTE_SEED       integer seed for reproducible random output\n'
        '  PALETTE_JITTER     1/true/yes/on to enable jitter by default\n'
        '  PALETTE_STYLE      default style (analogous)\n'
        '  PALETTE_LOG_LEVEL  DEBUG, INFO, WARNING (default), ERROR\n'
    )
    parser = argparse.ArgumentParser(
        prog='palette-gen',
        description='Colour palettes from a base colour, with WCAG and colour-blindness checks.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging to stderr')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    sub = parser.add_subparsers(dest='command', help='Export format or command')

    styles = [s.value for s in Style]

    # One subcommand per export format, help taken from the module docstring
    for name, exp in sorted(formats.items()):
        p = sub.add_parser(name, help=_short_doc(name, exp.help))
        p.add_argument('color', nargs='?', help='Base colour (default: random)')
        p.add_argument('-s', '--style', choices=styles, default=None, help='Palette style (default: PALETTE_STYLE)')
        p.add_argument('-j', '--jitter', action='store_true', default=None, help='Randomly perturb each colour')
        p.add_argument('--seed', type=int, default=None, help='Seed for jitter / random base colour')
        p.add_argument('-o', '--output', metavar='FILE', help='Write the export to FILE instead of stdout')
        p.add_argument('--swatch', metavar='FILE', help='Also save the palette as a PNG swatch strip')

    styles_parser = sub.add_parser('styles', help='List palette styles; preview them all for a colour')
    styles_parser.add_argument('color', nargs='?', help='Colour to preview every style with')

    random_parser = sub.add_parser('random', help='Print uniformly random colours')
    random_parser.add_argument('-n', '--count', type=int, default=5, help='How many colours (default: 5)')
    random_parser.add_argument('--seed', type=int, default=None, help='Seed for reproducible output')

    contrast_parser = sub.add_parser('contrast', help='WCAG contrast ratio between two colours')
    contrast_parser.add_argument('foreground', help='Text colour')
    contrast_parser.add_argument('background', help='Background colour')

    help_parser = sub.add_parser('help', help='Print full docs for an export format')
    help_parser.add_argument('topic', nargs='?', help='Format name')

    return parser


def _configure_logging(level: str) -> None:
    """Single stderr handler on the palette_gen logger."""
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter('%(levelname)s %(name)s: %(message)s'))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a format."""
    formats = registry.all_formats()

    if topic is None:
        print('Available export formats:\n')
        for name, exp in sorted(formats.items()):
            print(f'  {name:<14} {_short_doc(name, exp.help)}')
        print('\nRun: palette-gen help <format> for full docs.')
        return

    if topic not in formats:
        print(f'Unknown format: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(formats))}', file=sys.stderr)
        sys.exit(1)

    doc = registry.docs(topic)
    print(doc or f'(No module docs for {topic!r})')


def _print_styles(colour: str | None) -> None:
    if colour is None:
        for style, desc in STYLE_DESCRIPTIONS.items():
            print(f'  {style.value:<14} {desc}')
        return

    base = parse_color(colour)
    print(f'Palettes for {base}:\n')
    for style, palette in generate_all_styles(base).items():
        print(f'{style.value.capitalize()}: {STYLE_DESCRIPTIONS[style]}')
        print('  ' + ' '.join(palette))
        print()


def _print_contrast(fg: str, bg: str) -> None:
    c1, c2 = parse_color(fg), parse_color(bg)
    ratio = get_contrast_ratio(c1, c2)
    print(f'{c1} on {c2}: {ratio:.2f}:1')
    for level, size in WCAG_THRESHOLDS:
        mark = 'PASS' if passes_wcag(ratio, level, size) else 'FAIL'
        print(f'  {level:<3} {size:<6} {mark}')


def _run_export(args: argparse.Namespace, settings: Settings) -> None:
    seed = args.seed if args.seed is not None else settings.seed
    jitter = args.jitter if args.jitter is not None else settings.jitter
    style = args.style or settings.style
    rng = NumpyRandom(seed)

    if args.color:
        base = parse_color(args.color)
    else:
        base = random_hex_color(rng)
        print(f'palette-gen: random base colour {base}', file=sys.stderr)

    palette = generate_related_palette(base, style, jitter=jitter, rng=rng)
    content = export_palette(palette, args.command, base_color=base, style=style)

    if args.output:
        Path(args.output).write_text(content, encoding='utf-8')
        print(f'palette-gen: wrote {args.output}', file=sys.stderr)
    else:
        print(content)

    if args.swatch:
        render_swatch(palette).save(args.swatch)
        print(f'palette-gen: wrote {args.swatch}', file=sys.stderr)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(env_file=args.env_file)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    _configure_logging('DEBUG' if args.verbose else settings.log_level)
    if settings.source:
        logger.info('loaded settings from %s', settings.source)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == 'help':
            _print_help(args.topic)
        elif args.command == 'styles':
            _print_styles(args.color)
        elif args.command == 'random':
            seed = args.seed if args.seed is not None else settings.seed
            print('\n'.join(generate_random_palette(args.count, NumpyRandom(seed))))
        elif args.command == 'contrast':
            _print_contrast(args.foreground, args.background)
        else:
            _run_export(args, settings)
    except (PaletteError, ValueError) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
