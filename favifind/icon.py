"""The icon record returned by a search."""

from __future__ import annotations

import json
from dataclasses import dataclass, replace


@dataclass
class Icon:
    """A favicon found in an HTML page, a manifest or at a well-known path."""

    url: str
    mime_type: str = ""
    file_ext: str = ""

    def copy(self) -> Icon:
        """Return a new icon with the same values."""
        return replace(self)

    def to_dict(self) -> dict[str, str]:
        """Return the icon as a JSON-ready mapping."""
        return {
            "url": self.url,
            "mimetype": self.mime_type,
            "extension": self.file_ext,
        }

    def __str__(self) -> str:
        url = json.dumps(self.url, ensure_ascii=False)
        mime_type = json.dumps(self.mime_type, ensure_ascii=False)
        return f"Icon{{URL: {url},MimeType: {mime_type}}}"