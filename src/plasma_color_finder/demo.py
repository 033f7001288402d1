# src/plasma_color_finder/demo.py
import argparse
import json
import logging
import sys

from .color.types import DISTANCE_MODES
from .palette.loader import PALETTE_SOURCES


def main(argv=None):
    """CLI demo: parse a color and list the nearest palette colors."""
    from .orchestrator import find_palette_matches

    parser = argparse.ArgumentParser(
        prog="pcf-demo",
        description="Find the palette colors closest to a hex, rgb()/rgba() or CSS color name.",
    )
    parser.add_argument(
        "color",
        nargs="*",
        help="Color to look up (e.g. #FF293E, 'rgba(255,41,62,1)', magenta)",
    )
    parser.add_argument("--mode", choices=DISTANCE_MODES, default=None, help="Distance metric")
    parser.add_argument("--palette", choices=PALETTE_SOURCES, default=None, help="Palette to search")
    parser.add_argument(
        "--top-k",
        type=int,
        default=None,
        dest="top_k",
        help="Number of matches to return",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    args = parser.parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    text = " ".join(args.color) or "#FF293E"

    try:
        result = find_palette_matches(text, palette=args.palette, mode=args.mode, top_k=args.top_k)
    except Exception as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    if result["error"]:
        print(f"❌ {result['error']}", file=sys.stderr)
        if result["suggestions"]:
            print(f"   Did you mean: {', '.join(result['suggestions'])}?", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
