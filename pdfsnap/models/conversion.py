from typing import List, Optional

from pydantic import BaseModel, Field

CELEBRATION_COLORS = ["#4361ee", "#3a0ca3", "#f72585", "#4cc9f0"]


class CelebrationOptions(BaseModel):
    """Parameters handed to the browser's confetti effect."""

    particle_count: int = 150
    spread: int = 70
    origin_y: float = 0.6
    colors: List[str] = Field(default_factory=lambda: list(CELEBRATION_COLORS))


class ConversionResult(BaseModel):
    filename: str = Field(..., description="Name the PDF is downloaded under.")
    source_filename: str
    page_width: float
    page_height: float
    image_width: int
    image_height: int
    page_count: int = 1
    size_bytes: int
    download_url: str
    preview: Optional[str] = Field(default=None, description="PNG data URL of the page.")
    celebration: CelebrationOptions = Field(default_factory=CelebrationOptions)
