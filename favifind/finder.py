"""Find icons for websites in HTML, JSON manifests and well-known paths."""

from __future__ import annotations

import json
import mimetypes
from dataclasses import dataclass
from typing import IO, Any, Callable, Optional, Union
from urllib.parse import unquote, urljoin, urlsplit

import requests
from bs4 import BeautifulSoup

from .icon import Icon

USER_AGENT = "favifind/0.1"

#: Common names of icon files hosted in server roots.
ICON_NAMES = ("favicon.ico", "apple-touch-icon.png")

_ICON_RELS = frozenset(
    {
        "icon",
        "alternate icon",
        "shortcut icon",
        "apple-touch-icon",
        "apple-touch-icon-precomposed",
        "fluid-icon",
    }
)

_SESSION = requests.Session()

Filter = Callable[[Icon], Optional[Icon]]
Option = Callable[["Finder"], None]
Source = Union[str, bytes, IO[str], IO[bytes]]


class FetchError(Exception):
    """Raised when a server answers with a status above 299."""

    def __init__(self, url: str, status: int, reason: str) -> None:
        super().__init__(f"[{status}] {status} {reason}".rstrip())
        self.url = url
        self.status = status
        self.reason = reason


@dataclass
class ManifestIcon:
    """An icon entry from a manifest.json file."""

    url: str = ""
    type: str = ""
    raw_sizes: str = ""

    @classmethod
    def from_json(cls, entry: Any) -> ManifestIcon:
        if not isinstance(entry, dict):
            return cls()

        def text(key: str) -> str:
            value = entry.get(key)
            return value if isinstance(value, str) else ""

        return cls(url=text("src"), type=text("type"), raw_sizes=text("sizes"))


def resolve_url(base_url: Optional[str], url: str) -> str:
    """Resolve url against base_url; return "" if url cannot be parsed."""
    if not url or base_url is None:
        return url
    try:
        urlsplit(url)
        return urljoin(base_url, url)
    except ValueError:
        return ""


def _path_extension(url: str) -> str:
    try:
        path = unquote(urlsplit(url).path)
    except ValueError:
        return ""
    name = path.rpartition("/")[2]
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def mime_type_for_url(url: str) -> str:
    """Return the MIME type implied by the file extension of url's path."""
    ext = _path_extension(url)
    if not ext:
        return ""
    return mimetypes.guess_type("icon" + ext)[0] or ""


def file_extension(url: str) -> str:
    """Return the file extension of url's path, without the dot."""
    return _path_extension(url).removeprefix(".")


def _read(source: Source) -> Union[str, bytes]:
    if hasattr(source, "read"):
        return source.read()
    return source


class Finder:
    """Discovers favicons for a URL or an HTML document."""

    def __init__(self, *options: Option) -> None:
        self.ignore_manifest = False
        self.ignore_well_known = False
        self.session: requests.Session = _SESSION
        self.filters: list[Filter] = []
        for option in options:
            option(self)

    def find(self, url: str) -> list[Icon]:
        """Fetch the page at url and return the icons found for it."""
        urlsplit(url)
        with self._fetch(url) as response:
            markup = response.content
        return self._parse_html(markup, url)

    def find_reader(self, source: Source, base_url: Optional[str] = None) -> list[Icon]:
        """Return the icons found in an HTML document.

        base_url, if given, is used to resolve relative links.
        """
        if base_url is not None:
            urlsplit(base_url)
        return self._parse_html(_read(source), base_url)

    def parse_manifest(self, source: Source, base_url: Optional[str] = None) -> list[Icon]:
        """Return the icons listed in a JSON manifest."""
        try:
            document = json.loads(_read(source))
        except ValueError:
            return []
        entries = document.get("icons") if isinstance(document, dict) else None
        if not isinstance(entries, list):
            return []
        manifest_icons = [ManifestIcon.from_json(entry) for entry in entries]
        return [Icon(url=resolve_url(base_url, item.url)) for item in manifest_icons]

    def _fetch(self, url: str, *, stream: bool = False) -> requests.Response:
        response = self.session.get(url, headers={"User-Agent": USER_AGENT}, stream=stream)
        if response.status_code > 299:
            response.close()
            raise FetchError(url, response.status_code, response.reason or "")
        return response

    def _parse_html(self, markup: Union[str, bytes], base_url: Optional[str]) -> list[Icon]:
        soup = BeautifulSoup(markup, "html.parser", multi_valued_attributes=None)
        icons: list[Icon] = []
        manifest_url = resolve_url(base_url, "/manifest.json")

        for link in soup.find_all("link"):
            rel = (link.get("rel") or "").lower()
            if rel in _ICON_RELS:
                href = resolve_url(base_url, link.get("href") or "")
                if href:
                    icons.append(Icon(url=href, mime_type=link.get("type") or ""))
            elif rel == "manifest":
                href = resolve_url(base_url, link.get("href") or "")
                if href:
                    manifest_url = href

        if not self.ignore_manifest:
            icons.extend(self._fetch_manifest(manifest_url, base_url))
        if not self.ignore_well_known:
            icons.extend(self._well_known_icons(base_url))

        return self._post_process(icons, base_url)

    def _fetch_manifest(self, url: str, base_url: Optional[str]) -> list[Icon]:
        try:
            with self._fetch(url) as response:
                data = response.content
        except (FetchError, requests.RequestException):
            return []
        return self.parse_manifest(data, base_url)

    def _well_known_icons(self, base_url: Optional[str]) -> list[Icon]:
        if base_url is None:
            return []
        parts = urlsplit(base_url)
        root = f"{parts.scheme}://{parts.netloc.rpartition('@')[2]}/"
        icons = []
        for name in ICON_NAMES:
            url = root + name
            try:
                with self._fetch(url, stream=True):
                    pass
            except (FetchError, requests.RequestException):
                continue
            icons.append(Icon(url=url))
        return icons

    def _post_process(self, icons: list[Icon], base_url: Optional[str]) -> list[Icon]:
        tidied: dict[str, Icon] = {}
        for icon in icons:
            icon.url = resolve_url(base_url, icon.url)
            if not icon.mime_type:
                icon.mime_type = mime_type_for_url(icon.url)
            if not icon.url or not icon.mime_type:
                continue
            if not icon.file_ext:
                icon.file_ext = file_extension(icon.url)
            tidied[icon.url] = icon

        accepted = []
        for candidate in tidied.values():
            icon: Optional[Icon] = candidate
            for apply in self.filters:
                icon = apply(icon)
                if icon is None:
                    break
            if icon is not None:
                accepted.append(icon)

        accepted.sort(key=lambda item: item.url)
        return accepted


def with_session(session: requests.Session) -> Option:
    """Use the given HTTP session."""

    def option(finder: Finder) -> None:
        finder.session = session

    return option


def with_proxy(proxy_url: str) -> Option:
    """Send requests through the given proxy, e.g. http://host:port."""

    def option(finder: Finder) -> None:
        try:
            urlsplit(proxy_url)
        except ValueError:
            return
        if finder.session is _SESSION:
            finder.session = requests.Session()
        finder.session.proxies.update({"http": proxy_url, "https": proxy_url})

    return option


def with_filter(*filters: Filter) -> Option:
    """Only return icons accepted (and possibly modified) by the filters."""

    def option(finder: Finder) -> None:
        finder.filters.extend(filters)

    return option


def only_mime_type(*mime_types: str) -> Option:
    """Only return icons with one of the given MIME types."""
    accepted = frozenset(mime_types)

    def keep(icon: Icon) -> Optional[Icon]:
        return icon if icon.mime_type in accepted else None

    return with_filter(keep)


def ignore_well_known(finder: Finder) -> None:
    """Do not probe common locations such as /favicon.ico."""
    finder.ignore_well_known = True


def ignore_manifest(finder: Finder) -> None:
    """Do not fetch or parse a manifest file."""
    finder.ignore_manifest = True


def only_png(finder: Finder) -> None:
    """Ignore non-PNG icons."""
    only_mime_type("image/png")(finder)


def only_ico(finder: Finder) -> None:
    """Ignore non-ICO icons."""
    only_mime_type("image/x-icon", "image/vnd.microsoft.icon")(finder)


_DEFAULT_FINDER = Finder()


def find(url: str) -> list[Icon]:
    """Find icons for url with default options."""
    return _DEFAULT_FINDER.find(url)


def find_reader(source: Source, base_url: Optional[str] = None) -> list[Icon]:
    """Find icons in an HTML document with default options."""
    return _DEFAULT_FINDER.find_reader(source, base_url)