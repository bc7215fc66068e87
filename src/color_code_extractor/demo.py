# src/color_code_extractor/demo.py
import argparse
import json
import logging
import sys


def _print_cards(service, text, result) -> None:
    for card in service.cards(text, result=result):
        print(f"  {card.hex}  (label {card.label_color})")
        for name, value in card.formats.items():
            if name != "hex":
                print(f"      {name:<5} {value}")


def _print_harmonies(service, result) -> None:
    for color in result.colors:
        print(f"\n  Harmonies for {color.hex}:")
        for name, swatches in service.harmonies(color).items():
            print(f"      {name:<14} {' '.join(sw.hex for sw in swatches)}")


def main(argv=None):
    """CLI demo: find color codes in text, list distinct colors, optionally show harmonies."""
    from .extraction.orchestrator import ColorExtractionService

    parser = argparse.ArgumentParser(
        prog="color-code-demo",
        description="Find hex/rgb/rgba/hsl/hsla codes and bare triplets in text.",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to analyze (e.g. 'border: #FF0000; fill: rgb(0, 255, 0)')",
    )
    parser.add_argument("--json", action="store_true", help="Print the raw result as JSON")
    parser.add_argument("--html", action="store_true", help="Print highlighted HTML")
    parser.add_argument("--harmonies", action="store_true", help="Show harmonies per color")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    args = parser.parse_args(argv)
    text = " ".join(args.text) or "#FF0000 and rgb(0,255,0)"

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    try:
        service = ColorExtractionService(debug=args.debug)
        result = service.extract(text)
        if args.json:
            payload = result.to_dict()
            payload["cards"] = [c.to_dict() for c in service.cards(text, result=result)]
            if args.harmonies:
                payload["harmonies"] = {
                    c.hex: service.harmonies(c).as_hex_dict() for c in result.colors
                }
            print(json.dumps(payload, indent=2, ensure_ascii=False))
            return 0
        if args.html:
            print(service.highlight(text, result=result))
            return 0

        print(f"\n🎨 {result.count_label} found:\n")
        _print_cards(service, text, result)
        if args.harmonies:
            _print_harmonies(service, result)
    except Exception as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)
    return 0


if __name__ == "__main__":
    sys.exit(main())
