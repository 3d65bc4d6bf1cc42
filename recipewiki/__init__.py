"""RecipeWiki — a tiny flat-file recipe wiki."""

from recipewiki._version import __version__

__all__ = ["__version__"]
