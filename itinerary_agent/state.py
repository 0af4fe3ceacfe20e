"""
Itinerary Agent Data Model
==========================
Request and itinerary models shared by the pipeline, the API and the renderer

Design notes:
- TripRequest is fully normalized; the computed day count and date labels
  travel with it so prompt building and repair use the same values
- Itinerary models are lenient (defaults everywhere, extra keys allowed):
  generated content is not validated beyond JSON-parseability
- Field names of the itinerary follow the JSON contract (camelCase)
"""

from pydantic import BaseModel, ConfigDict, Field


class TripRequest(BaseModel):
    """Normalized trip parameters for one request"""

    destination: str = Field(description="Destination, trimmed and non-empty")
    start_date: str = Field(description="Start date text as given (trimmed)")
    end_date: str = Field(description="End date text as given (trimmed)")
    travelers: int | float = Field(default=1, description="Traveler count, may be NaN")
    budget: int | float | None = Field(default=None, description="Total budget, None when unset")
    interests: list[str] = Field(default_factory=list, description="Interest tags in given order")

    # 计算字段
    days_count: int = Field(description="Inclusive number of trip days")
    date_labels: list[str] = Field(description="One canonical label per day")


class TimeBlock(BaseModel):
    """One activity slot within a day"""

    model_config = ConfigDict(extra="allow")

    timeOfDay: str = Field(default="", description="Morning / Afternoon / Evening")
    title: str = Field(default="", description="Short activity title")
    description: str = Field(default="", description="One or two sentences")
    estCost: float = Field(default=0.0, description="Estimated cost per person")
    mapQuery: str = Field(default="", description="Free text for a maps search")


class ItineraryDay(BaseModel):
    """A single day of the plan"""

    model_config = ConfigDict(extra="allow")

    day: int = Field(default=0, description="1-based position")
    dateLabel: str = Field(default="", description="YYYY-MM-DD or 'Day N'")
    blocks: list[TimeBlock] = Field(default_factory=list, description="At most 3 blocks")


class ItinerarySummary(BaseModel):
    """Trip-level summary"""

    model_config = ConfigDict(extra="allow")

    vibe: str = Field(default="", description="One-line mood of the trip")
    tips: list[str] = Field(default_factory=list, description="Practical tips")
    estTotalCost: float = Field(default=0.0, description="Estimated total cost")


class Itinerary(BaseModel):
    """Structured multi-day itinerary returned to the caller"""

    model_config = ConfigDict(extra="allow")

    destination: str = Field(default="", description="Normalized request destination")
    summary: ItinerarySummary = Field(default_factory=ItinerarySummary)
    days: list[ItineraryDay] = Field(default_factory=list)


# ===== 常量定义 =====
DEFAULT_DAYS_COUNT = 4  # 日期无法解析时的默认天数
MAX_BLOCKS_PER_DAY = 3  # 每天最多保留的时间段数
