"""
layoutsmith command line.

    layoutsmith render INPUT [-o OUT] [--format svg|html]
    layoutsmith edit LAYOUT EDITS [-o OUT]
    layoutsmith presets
"""

import argparse
import sys
from pathlib import Path

from .core import LayoutError, LogContext, configure_logging, get_logger, get_settings
from .models import CANVAS_PRESETS, Layout
from .pipeline import LayoutParser, dumps_layout
from .render import html, svg

logger = get_logger(__name__)


def _read(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _write(text: str, out: str | None) -> None:
    if out is None or out == "-":
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")
        return
    Path(out).write_text(text, encoding="utf-8")
    logger.info("output_written", path=out, bytes=len(text.encode("utf-8")))


def cmd_render(args: argparse.Namespace, parser: LayoutParser) -> int:
    layout = parser.parse(_read(args.input))
    ctx = parser.render_context()
    if args.format == "html":
        document = html.render_html(layout, ctx)
    else:
        document = svg.render_svg(layout, ctx)
    _write(document, args.out)
    return 0


def cmd_edit(args: argparse.Namespace, parser: LayoutParser) -> int:
    current: Layout = parser.parse(_read(args.layout))
    response = parser.parse_edit_response(_read(args.edits), current)
    result = parser.apply_edit_response(current, response)
    _write(dumps_layout(result), args.out)
    return 0


def cmd_presets(args: argparse.Namespace, parser: LayoutParser) -> int:
    for name, size in CANVAS_PRESETS.items():
        print(f"{name:<14}{size.width}x{size.height}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="layoutsmith",
        description="Repair, lay out, edit and render generated UI layouts.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    render = commands.add_parser("render", help="Parse generator output and render it.")
    render.add_argument("input", help="Generator output (JSON, fenced or lenient). '-' reads stdin.")
    render.add_argument("-o", "--out", help="Output path. Defaults to stdout.")
    render.add_argument("--format", choices=["svg", "html"], default="svg", help="Output format.")
    render.set_defaults(handler=cmd_render)

    edit = commands.add_parser("edit", help="Apply an edit response to a layout.")
    edit.add_argument("layout", help="Current layout JSON.")
    edit.add_argument("edits", help="Edit response (diff or regenerate) or {\"operations\": [...]}.")
    edit.add_argument("-o", "--out", help="Output path for the processed layout JSON. Defaults to stdout.")
    edit.set_defaults(handler=cmd_edit)

    presets = commands.add_parser("presets", help="List canvas presets.")
    presets.set_defaults(handler=cmd_presets)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level, settings.json_logs)

    with LogContext(command=args.command):
        try:
            return args.handler(args, LayoutParser(settings))
        except LayoutError as e:
            logger.error("command_failed", error_type=type(e).__name__, error=str(e))
            print(f"error: {e}", file=sys.stderr)
            return 1
        except OSError as e:
            logger.error("io_failed", error=str(e))
            print(f"error: {e}", file=sys.stderr)
            return 1


if __name__ == "__main__":
    sys.exit(main())
