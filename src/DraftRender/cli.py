from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import raw_parser, renderer_html
from .model import HashtagConfig
from .utils import configure_logging, resolve_output_path, write_html


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="draftrender",
        description="Convert raw rich-text editor content (JSON or YAML) into an HTML fragment.",
    )
    parser.add_argument("input", type=str, help="Path to the raw content file")
    parser.add_argument("-o", "--output", type=str, help="Output HTML path")
    parser.add_argument("--hashtags", action="store_true", help="Link hashtags found in block text")
    parser.add_argument("--trigger", type=str, default="#", help="Hashtag trigger character")
    parser.add_argument("--separator", type=str, default=" ", help="Character that ends a hashtag")
    parser.add_argument("--directional", action="store_true", help='Add dir="auto" to block elements')
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)
    input_path = Path(args.input).expanduser()
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")
    output_path = resolve_output_path(input_path, args.output)

    logging.info("Reading %s", input_path)
    source = input_path.read_text(encoding="utf-8")
    logging.debug("Source length: %d chars", len(source))

    logging.info("Parsing raw content...")
    document = raw_parser.parse_raw_document(source)
    logging.debug("Parsed %d blocks, %d entities", len(document.blocks), len(document.entity_map))

    hashtag_config = HashtagConfig(trigger=args.trigger, separator=args.separator) if args.hashtags else None
    html = renderer_html.render(document, hashtag_config=hashtag_config, directional=args.directional)

    logging.info("Writing HTML to %s", output_path)
    write_html(output_path, html)

    logging.info("Done. Saved to %s", output_path)


if __name__ == "__main__":
    main()
