"""hwb-palette — RGB / HSL / HWB colour conversion and palette swatch images.

Usage: hwb-palette <command> [options]

Renders are auto-discovered from hwb_palette/renders/.
Each render module's docstring is its documentation.
Run `hwb-palette help <render>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, hwb-palette looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import os
import sys

from hwb_palette import registry
from hwb_palette.core.env import load_env, load_settings
from hwb_palette.core.fixed import hex_to_rgb, hwb_to_rgb, rgb_to_hex, rgb_to_hue, rgb_to_hwb
from hwb_palette.core.report import format_html_table, format_json, format_text
from hwb_palette.core.types import HWB, RenderReport


def _short_doc(name: str, fallback: str) -> str:
    doc = (registry.module_for(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f'must be positive, got {value}')
    return value


def _hwb_triple(text: str) -> HWB:
    parts = text.split(',')
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f'expected H,W,B got {text!r}')
    try:
        hwb = HWB(*(int(p) for p in parts))
    except ValueError:
        raise argparse.ArgumentTypeError(f'expected integers, got {text!r}') from None
    if not 0 <= hwb.hue < 3600:
        raise argparse.ArgumentTypeError(f'hue must be 0-3599, got {hwb.hue}')
    if not (0 <= hwb.whiteness <= 1000 and 0 <= hwb.blackness <= 1000):
        raise argparse.ArgumentTypeError(f'whiteness and blackness must be 0-1000, got {text!r}')
    return hwb


def _build_parser() -> argparse.ArgumentParser:
    renders = registry.all_renders()

    epilog = (
        'Examples:\n'
        '  hwb-palette palette --hue 120\n'
        '  hwb-palette all --out-dir ./images --json\n'
        '  hwb-palette hsl-grid --steps 16 --scale 8\n'
        '  hwb-palette convert "#cc3333"\n'
        '  hwb-palette convert --hwb 300,200,0\n'
        '  hwb-palette table > swatches.html\n'
        '  hwb-palette help palette\n'
        '\n'
        'Settings env vars (set in .env or environment):\n'
        '  HWB_PALETTE_OUT_DIR  output directory (default: images)\n'
        '  HWB_PALETTE_SCALE    swatch size in pixels (default: 16)\n'
        '  HWB_PALETTE_STEPS    grid steps per axis (default: 8)\n'
    )
    parser = argparse.ArgumentParser(
        prog='hwb-palette',
        description='RGB / HSL / HWB colour conversion and palette swatch images.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    # Auto-register each render as a subcommand using module docstring
    for name, render in sorted(renders.items()):
        p = sub.add_parser(name, help=_short_doc(name, render.help))
        p.add_argument('-o', '--out-dir', help='Output directory (overrides HWB_PALETTE_OUT_DIR)')
        p.add_argument('-s', '--scale', type=_positive_int, help='Swatch size in pixels')
        p.add_argument('-n', '--steps', type=_positive_int, help='Grid steps per axis')
        p.add_argument('-u', '--hue', type=int, help='Hue in degrees (default: every 30 degrees)')
        p.add_argument('-a', '--alpha', action='store_true', help='Write RGBA instead of RGB')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    help_parser = sub.add_parser('help', help='Print full docs for a render')
    help_parser.add_argument('topic', nargs='?', help='Render name')

    table_parser = sub.add_parser('table', help='Print an HTML table of HSL swatches')
    table_parser.add_argument('--step', type=_positive_int, default=15, help='Hue step in degrees (default: 15)')
    table_parser.add_argument('--saturation-levels', type=_positive_int, default=4)
    table_parser.add_argument('--luminance-levels', type=_positive_int, default=15)

    convert_parser = sub.add_parser('convert', help='Convert a hex colour to HWB, or HWB to RGB')
    convert_parser.add_argument('colour', nargs='?', help='Hex colour, e.g. #ff8000')
    convert_parser.add_argument('--hwb', type=_hwb_triple, metavar='H,W,B', help='HWB in tenths/permille')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a render."""
    renders = registry.all_renders()

    if topic is None:
        print('Available renders:\n')
        for name, render in sorted(renders.items()):
            print(f'  {name:<14} {_short_doc(name, render.help)}')
        print('\nRun: hwb-palette help <render> for full docs.')
        return

    if topic not in renders:
        print(f'Unknown render: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(renders))}', file=sys.stderr)
        sys.exit(1)

    doc = (registry.module_for(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def _convert(args: argparse.Namespace) -> None:
    if args.hwb is not None:
        rgb = hwb_to_rgb(args.hwb)
        print(f'hwb: {tuple(args.hwb)}')
        print(f'rgb: {tuple(rgb)}')
        print(f'hex: {rgb_to_hex(rgb)}')
        return

    if not args.colour:
        print('Error: give a hex colour or --hwb H,W,B', file=sys.stderr)
        sys.exit(1)

    rgb = hex_to_rgb(args.colour)
    print(f'hex: {rgb_to_hex(rgb)}')
    print(f'rgb: {tuple(rgb)}')
    print(f'hwb: {tuple(rgb_to_hwb(rgb))}')
    print(f'hue: {rgb_to_hue(rgb) / 10:g}')


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Load .env before anything else, OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'hwb-palette: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(getattr(args, 'topic', None))
        return

    if args.command == 'table':
        print(format_html_table(args.step, args.saturation_levels, args.luminance_levels))
        return

    if args.command == 'convert':
        _convert(args)
        return

    try:
        settings = load_settings()
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    # CLI flags win over env settings
    if args.out_dir:
        settings.out_dir = args.out_dir
    if args.scale:
        settings.scale = args.scale
    if args.steps:
        settings.steps = args.steps
    settings.alpha = args.alpha

    report = RenderReport(out_dir=settings.out_dir)
    render = registry.get(args.command)
    try:
        os.makedirs(settings.out_dir, exist_ok=True)
        render.execute(settings, report, args)
    except OSError as e:
        print(f'Error: cannot write images to {settings.out_dir}: {e}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))


if __name__ == '__main__':
    main()
