"""
Video-related data models for LinkSnatcher.

This module contains the Pydantic models decoded from the video resolution
API: the downloadable media options and the resolved video metadata.
Display fields are read permissively: scalar values are shown as text and
null media entries are skipped. Only structural problems fail validation.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, List, Optional


def scalar_to_display(v: Any) -> Any:
    """Turn a JSON scalar into its display string, leaving other values as-is."""
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    if isinstance(v, (int, float)):
        return str(v)
    return v


class MediaOption(BaseModel):
    """One downloadable variant of a resolved video."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    url: str = Field(..., description="Direct download URL")
    quality: Optional[str] = Field(None, description="Quality label (e.g., '720p', 'hd_no_watermark')")
    formatted_size: Optional[str] = Field(None, alias="formattedSize", description="Human-readable size")

    @field_validator('quality', 'formatted_size', mode='before')
    @classmethod
    def validate_display_fields(cls, v):
        """Accept numbers for labels, e.g. a quality of 720."""
        return scalar_to_display(v)

    @property
    def label(self) -> str:
        """Display label for the download link."""
        label = self.quality or "Download"
        if self.formatted_size:
            label += f" ({self.formatted_size})"
        return label


class ResolutionResult(BaseModel):
    """Model representing a resolved video and its downloadable variants."""

    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = Field(None, description="Video title")
    thumbnail: Optional[str] = Field(None, description="Thumbnail URL")
    duration: Optional[str] = Field(None, description="Duration as sent by the API")
    source: Optional[str] = Field(None, description="Source platform label")
    medias: List[MediaOption] = Field(default_factory=list, description="Download options, in API order")

    @field_validator('duration', mode='before')
    @classmethod
    def validate_duration(cls, v):
        """Show a numeric duration as it arrives."""
        return scalar_to_display(v)

    @field_validator('medias', mode='before')
    @classmethod
    def validate_medias(cls, v):
        """Treat a null media list as empty and skip null entries."""
        if v is None:
            return []
        if isinstance(v, list):
            return [media for media in v if media is not None]
        return v

    @property
    def display_title(self) -> str:
        return self.title or "Untitled"
