"""Command-line interface for viewengine."""

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import ValidationError

from .io_utils import warn
from .models import RenderOptions, TreeFile, load_tree_file
from .renderer import Renderer


def _load_tree(path: Path) -> TreeFile:
    if not path.exists():
        raise SystemExit(f"Tree file not found: {path}")
    try:
        return load_tree_file(path)
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        raise SystemExit(f"Could not parse {path}: {exc}") from exc
    except ValidationError as exc:
        raise SystemExit(f"Invalid tree in {path}: {exc}") from exc


def _resolve_options(tree: TreeFile, args: argparse.Namespace) -> RenderOptions:
    updates = {}
    if args.mode is not None:
        updates["mode"] = args.mode
    if args.document is not None:
        updates["document"] = args.document
    if args.newline is not None:
        updates["newline"] = "\r\n" if args.newline == "crlf" else "\n"
    return tree.options.model_copy(update=updates)


def _handle_render(args: argparse.Namespace) -> None:
    tree_path = Path(args.tree)
    tree = _load_tree(tree_path)
    options = _resolve_options(tree, args)
    nodes = tree.nodes()

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with out_path.open("wb") as fh:
            written = Renderer(fh).render(
                nodes,
                is_html=options.is_html,
                document=options.document,
                newline=options.resolved_newline,
            )
    else:
        sys.stdout.flush()
        written = Renderer(sys.stdout.buffer).render(
            nodes,
            is_html=options.is_html,
            document=options.document,
            newline=options.resolved_newline,
        )
        sys.stdout.buffer.flush()

    if args.stats:
        kind = "document" if options.document else "view"
        target = args.out or "stdout"
        warn(f"{tree_path}: wrote {written} bytes ({options.mode} {kind}) to {target}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="viewengine",
        description="Serialize declarative HTML/XML trees.",
    )
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render a tree file to HTML or XML.",
        description="Load a YAML or JSON tree file and write the serialized markup.",
    )
    render_parser.add_argument("tree", help="Path to the tree file (YAML or JSON).")
    render_parser.add_argument(
        "--mode",
        choices=["html", "xml"],
        default=None,
        help="Override the serialization mode from the tree file.",
    )
    document_group = render_parser.add_mutually_exclusive_group()
    document_group.add_argument(
        "--document",
        dest="document",
        action="store_true",
        default=None,
        help="Prepend the doctype or XML declaration.",
    )
    document_group.add_argument(
        "--fragment",
        dest="document",
        action="store_false",
        default=None,
        help="Render without a preamble.",
    )
    render_parser.add_argument(
        "--newline",
        choices=["lf", "crlf"],
        default=None,
        help="Line terminator written after the preamble (default: platform).",
    )
    render_parser.add_argument(
        "--out",
        default=None,
        help="Write output to this file instead of stdout.",
    )
    render_parser.add_argument(
        "--stats",
        action="store_true",
        help="Report the number of bytes written on stderr.",
    )
    render_parser.set_defaults(func=_handle_render)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
