# favifind

Find the icons a website offers. `favifind` looks in three places:

- the HTML page itself: `<link>` elements whose `rel` is `icon`,
  `alternate icon`, `shortcut icon`, `apple-touch-icon`,
  `apple-touch-icon-precomposed` or `fluid-icon` (compared without
  regard to case);
- the web app manifest: the one the page links to with
  `<link rel="manifest">`, or `/manifest.json` if there is no such link;
- well-known paths in the server root: `/favicon.ico` and
  `/apple-touch-icon.png`, kept if a GET request for them succeeds.

Each icon comes with an absolute URL, a MIME type and a file extension.
Where a `<link>` has no `type` attribute, the MIME type is guessed from
the file extension of the URL. Icons whose MIME type can't be
determined are dropped, duplicates (same URL) are merged, and the
result is sorted by URL.

Relative URLs in the manifest are resolved against the page URL, not
the manifest's own URL.

## Installation

```
pip install favifind
```

## Command line

```
favifind https://www.example.com
```

prints one line per icon:

```
  1: https://www.example.com/apple-touch-icon.png [image/png]
  2: https://www.example.com/favicon.ico [image/x-icon]
```

Options:

- `--json` (or `-json`) prints the icons as a JSON list of objects with
  `url`, `mimetype` and `extension` keys;
- `--version` (or `-version`) prints the version and build date and exits;
- `-h` prints usage to standard error and exits; so does running the
  command without a URL.

The URL has to start with `http://` or `https://`. An invalid URL or a
failed lookup prints a message to standard error and exits with
status 1.

## Library

```python
from favifind.finder import find, find_reader

for icon in find("https://www.example.com"):
    print(icon.url, icon.mime_type, icon.file_ext)

# Parse HTML you already have; the base URL resolves relative links.
with open("index.html", encoding="utf-8") as page:
    icons = find_reader(page, "https://www.example.com")
```

`find_reader` accepts a string, bytes, or a text or binary file object.
Without a base URL, links are left as written and the well-known paths
are not probed; the manifest is only fetched if its URL is absolute.

Icons are `favifind.icon.Icon` dataclasses with `url`, `mime_type` and
`file_ext` fields, plus `copy()` and `to_dict()` (the mapping the
command prints with `--json`).

A manifest you already have can be read with
`Finder().parse_manifest(source, base_url)`, which returns the icons it
lists; invalid JSON gives an empty list.

### Configuring a Finder

`Finder` takes options that change where it looks and which icons it
keeps:

```python
import requests
from favifind.finder import (
    Finder,
    ignore_manifest,
    ignore_well_known,
    only_png,
    only_mime_type,
    with_filter,
    with_session,
    with_proxy,
)

finder = Finder(ignore_manifest, ignore_well_known, only_png)
icons = finder.find("https://www.example.com")

session = requests.Session()
finder = Finder(with_session(session), only_mime_type("image/png", "image/jpeg"))

finder = Finder(with_proxy("http://localhost:3128"))
```

- `ignore_manifest` doesn't fetch or parse a manifest;
- `ignore_well_known` doesn't request `/favicon.ico` and friends;
- `only_png`, `only_ico` and `only_mime_type(...)` keep icons of the
  given types (`only_ico` accepts `image/x-icon` and
  `image/vnd.microsoft.icon`);
- `with_filter(func, ...)` adds filters: each takes an `Icon` and returns
  it (possibly changed) or `None` to drop it;
- `with_session` sets the `requests.Session` used for all requests;
  `with_proxy` sends HTTP and HTTPS requests through the given proxy.

With both `ignore_manifest` and `ignore_well_known`, a lookup makes a
single request, for the page itself. Requests carry the User-Agent
`favifind/0.1`.

If the page answers with a status above 299, `find` raises
`favifind.finder.FetchError` (with `url`, `status` and `reason`
attributes); network failures raise the `requests` exception. A missing
manifest or well-known file is simply skipped.

### Helpers

`resolve_url(base_url, url)`, `mime_type_for_url(url)` and
`file_extension(url)` are the building blocks the finder uses for
resolving links and guessing types from file extensions.