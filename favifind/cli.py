"""Command-line interface: find favicons for a URL and print them."""

from __future__ import annotations

import argparse
import json
import sys
from typing import NoReturn, Optional, Sequence

import requests

from .finder import FetchError, Finder
from .icon import Icon

VERSION = "undefined"
BUILD_DATE = "undefined"

USAGE = """usage: favicon <url>

retrieve, favicons for URL

  -h\tshow this message and exit
  -json
    \toutput favicon list as JSON
  -version
    \tshow version number and exit
"""

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


class _ArgumentParser(argparse.ArgumentParser):
    """Parser that reports bad flags with the command's own usage text."""

    def error(self, message: str) -> NoReturn:
        sys.stderr.write(f"{message}\n")
        sys.stderr.write(USAGE)
        raise SystemExit(2)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="favicon", add_help=False, allow_abbrev=False)
    parser.add_argument("-h", "--h", dest="help", action="store_true")
    parser.add_argument("-json", "--json", dest="json", action="store_true")
    parser.add_argument("-version", "--version", dest="version", action="store_true")
    parser.add_argument("args", nargs="*")
    return parser


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def _icons_json(icons: list[Icon]) -> str:
    text = json.dumps([icon.to_dict() for icon in icons], indent=2, ensure_ascii=False)
    for char, escaped in _HTML_ESCAPES.items():
        text = text.replace(char, escaped)
    return text


def _fatal(message: str) -> int:
    sys.stderr.write(f"{message}\n")
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; return the process exit status."""
    options = _build_parser().parse_args(sys.argv[1:] if argv is None else list(argv))

    if options.version:
        print(f"favicon {VERSION}")
        print(f"built: {BUILD_DATE}")
        return 0

    if options.help or not options.args:
        sys.stderr.write(USAGE)
        return 0

    url = options.args[0]
    lowered = url.lower()
    if not lowered.startswith(("http://", "https://")):
        return _fatal(f"invalid URL: {_quote(lowered)}")

    finder = Finder()
    try:
        icons = finder.find(url)
    except (FetchError, requests.RequestException, ValueError) as err:
        return _fatal(str(err))

    if options.json:
        print(_icons_json(icons))
        return 0

    for number, icon in enumerate(icons, start=1):
        print(f"{number:3d}: {icon.url} [{icon.mime_type}]")
    return 0


if __name__ == "__main__":
    sys.exit(main())