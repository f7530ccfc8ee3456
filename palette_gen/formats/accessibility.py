"""Human-readable WCAG contrast report for every pair of palette colours.

Lists totals, AA / AAA compliance counts with percentages, the average
contrast ratio, the three highest-contrast pairs, then every pair with
pass/fail marks for AA, AA large, AAA and AAA large text.

Thresholds: AA normal 4.5, AA large 3.0, AAA normal 7.0, AAA large 4.5.

Example:
    palette-gen accessibility '#3498db' --style complementary
"""

import math

from palette_gen.core.accessibility import generate_accessibility_report, top_contrast_pairs
from palette_gen.core.types import ColorPair, Exporter, ExportRequest

exporter = Exporter(
    name='accessibility',
    help='WCAG contrast report for every colour pair (AA/AAA, normal/large).',
)

PASS = '✓'
FAIL = '✗'


def _pct(count: int, total: int) -> int:
    if total == 0:
        return 0
    return int(math.floor(count / total * 100 + 0.5))


def _mark(passed: bool) -> str:
    return PASS if passed else FAIL


def _pair_label(pair: ColorPair) -> str:
    return f'{pair.color1} ↔ {pair.color2}'


@exporter.render
def render(request: ExportRequest) -> str:
    report = generate_accessibility_report(request.colors)
    s = report.summary
    total = s.total_pairs

    lines = ['Accessibility Report']
    if request.base_color or request.style:
        lines.append(f'Base: {request.base_color or "-"}  Style: {request.style or "-"}')
    lines.append('')
    lines.append(f'Total color pairs: {total}')
    lines.append(f'WCAG AA compliant: {s.aa_compliant}/{total} ({_pct(s.aa_compliant, total)}%)')
    lines.append(
        f'WCAG AA large text compliant: {s.aa_large_compliant}/{total} ({_pct(s.aa_large_compliant, total)}%)'
    )
    lines.append(f'WCAG AAA compliant: {s.aaa_compliant}/{total} ({_pct(s.aaa_compliant, total)}%)')
    lines.append(
        f'WCAG AAA large text compliant: {s.aaa_large_compliant}/{total} ({_pct(s.aaa_large_compliant, total)}%)'
    )
    lines.append(f'Average contrast ratio: {s.average_contrast:.2f}:1')

    if report.color_pairs:
        lines.append('')
        lines.append('Top contrast ratios:')
        for i, pair in enumerate(top_contrast_pairs(report), start=1):
            lines.append(f'  {i}. {_pair_label(pair)}  {pair.contrast:.2f}:1  {_mark(pair.aa)} AA')

        lines.append('')
        lines.append('Color pairs:')
        for pair in report.color_pairs:
            lines.append(
                f'  {_pair_label(pair)}  {pair.contrast:.2f}:1  '
                f'AA {_mark(pair.aa)}  AA-large {_mark(pair.aa_large)}  '
                f'AAA {_mark(pair.aaa)}  AAA-large {_mark(pair.aaa_large)}'
            )

    return '\n'.join(lines)
