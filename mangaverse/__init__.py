"""Mangaverse: manga reading backend over MangaDex and MangaPlus."""

__version__ = "0.1.0"
