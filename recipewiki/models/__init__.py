from recipewiki.models.models import IndexEntry, Page

__all__ = ["IndexEntry", "Page"]
