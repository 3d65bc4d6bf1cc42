from recipewiki.schemas.schemas import (
    HealthResponse,
    PageSave, PageResponse, IndexEntryResponse,
    RenderResponse,
    TITLE_PATTERN,
)

__all__ = [
    "HealthResponse",
    "PageSave", "PageResponse", "IndexEntryResponse",
    "RenderResponse",
    "TITLE_PATTERN",
]
