#!/usr/bin/env python3
"""Transformime CLI - render notebook output bundles to HTML."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from transformime import __version__
from transformime.config import TransformimeConfig, build_transformime
from transformime.display import HTMLDisplaySurface
from transformime.errors import ConfigurationError, RenderError
from transformime.transformer import TransformerCatalog
from transformime.transformime import Transformime
from transformime.utils.logging import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOTHING_RENDERED = 1
EXIT_ERROR = 2


def load_bundle(path: Path) -> Dict[str, Any]:
    """Load a mimebundle from a JSON file.

    The file may hold a plain mimebundle or a notebook output object with a
    `data` key. Text payloads stored as lists of lines are joined. JSON
    mimetypes keep their parsed document, every other payload must be a
    string.

    Args:
        path: Path to the JSON file

    Returns:
        The mimebundle

    Raises:
        ConfigurationError: If the file does not hold a JSON object, or a
            non-JSON payload is not text
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            content = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(content, dict):
        raise ConfigurationError(f"{path} must contain a JSON object")
    if isinstance(content.get("data"), dict):
        content = content["data"]

    bundle: Dict[str, Any] = {}
    for mimetype, payload in content.items():
        if _is_json_mimetype(mimetype):
            bundle[mimetype] = payload
            continue
        if isinstance(payload, list) and all(isinstance(p, str) for p in payload):
            payload = "".join(payload)
        if not isinstance(payload, str):
            raise ConfigurationError(
                f"{path}: payload for {mimetype} must be a string or a list "
                f"of strings, got {type(payload).__name__}"
            )
        bundle[mimetype] = payload
    return bundle


def _is_json_mimetype(mimetype: str) -> bool:
    """Check if a mimetype carries a JSON document."""
    return mimetype == "application/json" or mimetype.endswith("+json")


def _load_transformime(config_path: Optional[str]) -> Transformime:
    """Build the dispatcher from an optional YAML config file."""
    if config_path:
        config = TransformimeConfig.from_yaml(config_path)
    else:
        config = TransformimeConfig()
    return build_transformime(config)


def cmd_render(args: argparse.Namespace) -> int:
    """Render a mimebundle to an HTML page."""
    try:
        transformime = _load_transformime(args.config)
        bundle = load_bundle(Path(args.bundle))
        artifact = transformime.transform(bundle)
    except (ConfigurationError, RenderError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if artifact is None:
        print(
            f"No renderable representation in {args.bundle} "
            f"(offered: {', '.join(sorted(bundle)) or 'nothing'})",
            file=sys.stderr,
        )
        return EXIT_NOTHING_RENDERED

    logger.info(f"Rendering {artifact.mimetype} from {args.bundle}")
    surface = HTMLDisplaySurface()
    surface.attach(artifact)
    page = surface.render_page(title=args.title or Path(args.bundle).name)

    if args.output:
        Path(args.output).write_text(page, encoding="utf-8")
        print(f"Wrote {artifact.mimetype} output to {args.output}")
    else:
        sys.stdout.write(page)
    return EXIT_OK


def cmd_mimetypes(args: argparse.Namespace) -> int:
    """List registered mimetypes in precedence order."""
    try:
        transformime = _load_transformime(args.config)
    except (ConfigurationError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    for mimetype in transformime.mimetypes:
        transformer = transformime.transformers[mimetype]
        name = TransformerCatalog.name_of(transformer) or type(transformer).__name__
        marker = "" if mimetype in transformime.order else "  (not in order)"
        print(f"{mimetype:45} {name}{marker}")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="transformime",
        description="Render Jupyter mimebundles with the preferred transformer.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command")

    render = subparsers.add_parser("render", help="Render a bundle to HTML")
    render.add_argument("bundle", help="JSON file holding a mimebundle")
    render.add_argument("--config", help="YAML configuration file")
    render.add_argument("--output", "-o", help="Write the page to this file")
    render.add_argument("--title", help="Page title (default: bundle filename)")
    render.set_defaults(func=cmd_render)

    mimetypes = subparsers.add_parser(
        "mimetypes", help="List registered mimetypes in precedence order"
    )
    mimetypes.add_argument("--config", help="YAML configuration file")
    mimetypes.set_defaults(func=cmd_mimetypes)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(getattr(logging, args.log_level))

    if not getattr(args, "func", None):
        parser.print_help()
        return EXIT_ERROR
    return int(args.func(args))


if __name__ == "__main__":
    sys.exit(main())
