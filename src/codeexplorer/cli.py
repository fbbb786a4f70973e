"""Command-line interface for the function index.

    codeexplorer scan [ROOT] [--tag TAG] [--indent N]
    codeexplorer serve [ROOT] [--host HOST] [--port PORT]
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .config import Config
from .scan import SCAN_ERRORS, scan_as_dicts


def _scan(args: argparse.Namespace) -> int:
    try:
        data = scan_as_dicts(args.root, tag=args.tag)
    except SCAN_ERRORS as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(json.dumps(data, indent=args.indent))
    return 0


def _serve(args: argparse.Namespace) -> int:
    from .app import create_dev_app

    root = Path(args.root).resolve()
    try:
        app = create_dev_app(root)
    except SCAN_ERRORS as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"Code explorer running at http://{args.host}:{args.port}")
    app.run(host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="codeexplorer", description="Index functions in a TypeScript/JavaScript tree"
    )
    sub = ap.add_subparsers(dest="command", required=True)

    scan_cmd = sub.add_parser("scan", help="Print the function index as JSON")
    scan_cmd.add_argument("root", nargs="?", default=".", help="Directory to scan")
    scan_cmd.add_argument("--tag", "-t", help="Only functions carrying this @tag")
    scan_cmd.add_argument("--indent", type=int, default=2, help="JSON indentation")
    scan_cmd.set_defaults(func=_scan)

    serve_cmd = sub.add_parser("serve", help="Run the dev server")
    serve_cmd.add_argument("root", nargs="?", default=".", help="Directory to serve")
    serve_cmd.add_argument("--host", default=Config.HOST)
    serve_cmd.add_argument("--port", "-p", type=int, default=Config.PORT)
    serve_cmd.set_defaults(func=_serve)

    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
