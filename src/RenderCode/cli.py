from __future__ import annotations

import argparse
import dataclasses
import logging
from pathlib import Path

from . import pipeline
from .config import RenderConfig, load_config, parse_prefix_mode
from .errors import RenderCodeError
from .printer import PrefixMode
from .utils import configure_logging, read_markdown, resolve_output_path, write_text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rendercode",
        description="Convert Markdown into element construction code.",
    )
    parser.add_argument("input", type=str, help="Path to Markdown file")
    parser.add_argument("-o", "--output", type=str, help="Output code path")
    parser.add_argument("--html", type=str, help="Also write the HTML preview to this path")
    parser.add_argument("--details", type=str, help="Also write the parsed document dump to this path")
    parser.add_argument(
        "--prefix",
        choices=[mode.value for mode in PrefixMode],
        help="Constructor naming (overrides the config file)",
    )
    parser.add_argument("--config", type=str, help="YAML config file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)
    input_path = Path(args.input).expanduser()
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")
    output_path = resolve_output_path(input_path, args.output)

    try:
        config = load_config(args.config) if args.config else RenderConfig()
        overrides: dict = {"html_preview": bool(args.html)}
        if args.details:
            overrides["show_details"] = True
        if args.prefix:
            overrides["prefix_mode"] = parse_prefix_mode(args.prefix)
        config = dataclasses.replace(config, **overrides)
    except RenderCodeError as exc:
        logging.error("%s", exc)
        raise SystemExit(1) from exc

    logging.info("Reading %s", input_path)
    markdown_text = read_markdown(input_path)
    logging.debug("Markdown length: %d chars", len(markdown_text))

    logging.info("Generating code (%s constructors)...", config.prefix_mode.value)
    preview = pipeline.render_preview(markdown_text, config)

    if args.html and preview.html is not None:
        logging.info("Writing HTML preview to %s", args.html)
        write_text(Path(args.html), preview.html)
    if args.details and preview.details is not None:
        logging.info("Writing document dump to %s", args.details)
        write_text(Path(args.details), preview.details)

    if preview.error:
        logging.error("%s", preview.error)
        raise SystemExit(1)

    write_text(output_path, preview.code + "\n" if preview.code else "")
    logging.info("Done. Saved to %s", output_path)


if __name__ == "__main__":
    main()
