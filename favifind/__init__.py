"""Find favicons for websites in HTML, web app manifests and well-known paths."""

__version__ = "0.1.0"