"""
Pydantic schemas for GIF Explorer
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List, Dict

# Giphy's placeholder for items that never trended
NOT_TRENDING = "0000-00-00 00:00:00"


class Rendition(BaseModel):
    """One rendition of a GIF (fixed_height, original, ...)

    Giphy sends dimensions as strings and some renditions (original_mp4,
    looping, preview) carry no ``url``.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    url: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None

    @field_validator("url", "width", "height", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class MediaItem(BaseModel):
    """GIF record as returned by the media API"""
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    title: str = ""
    rating: str = ""
    username: Optional[str] = None
    source: Optional[str] = None
    source_tld: Optional[str] = None
    import_datetime: Optional[str] = None
    trending_datetime: Optional[str] = None
    images: Dict[str, Rendition] = Field(default_factory=dict)
    url: str = ""

    @property
    def is_trending(self) -> bool:
        """Whether the item carries a real trending timestamp"""
        return bool(self.trending_datetime) and self.trending_datetime != NOT_TRENDING

    def rendition_url(self, name: str) -> Optional[str]:
        """Get the URL of a named rendition"""
        rendition = self.images.get(name)
        if rendition is not None:
            return rendition.url
        return None


class Pagination(BaseModel):
    """Upstream pagination block"""
    total_count: Optional[int] = None
    count: Optional[int] = None
    offset: Optional[int] = None


class Meta(BaseModel):
    """Upstream response metadata"""
    status: Optional[int] = None
    msg: Optional[str] = None
    response_id: Optional[str] = None


class PagedResult(BaseModel):
    """One page of items plus whatever metadata the upstream attached"""
    model_config = ConfigDict(extra="allow")

    data: List[MediaItem]
    pagination: Optional[Pagination] = None
    meta: Optional[Meta] = None


class ErrorResponse(BaseModel):
    """Error response"""
    error: str
