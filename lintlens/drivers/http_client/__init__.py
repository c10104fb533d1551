"""HTTP driver for fetching documentation pages."""

from lintlens.drivers.http_client.http_client import DocumentFetcher

__all__ = ["DocumentFetcher"]
