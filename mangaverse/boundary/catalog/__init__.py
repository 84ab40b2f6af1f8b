"""
Upstream catalog adapters.

MangaDex and MangaPlus HTTP clients, MangaDex normalization helpers and
the image proxy fetcher.
"""

from mangaverse.boundary.catalog.mangadex_client import MangaDexClient
from mangaverse.boundary.catalog.mangaplus_client import MangaPlusClient
from mangaverse.boundary.catalog.image_proxy import ImageProxyFetcher, ProxiedImage

__all__ = [
    "MangaDexClient",
    "MangaPlusClient",
    "ImageProxyFetcher",
    "ProxiedImage",
]
