from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class LikeRecord:
    """One social media post and the likes it received."""

    platform: str
    post_type: str
    date: str
    age_group: str
    likes: float


@dataclass(frozen=True)
class PostTypeAverage:
    """Average likes for one (platform, post type) pair."""

    platform: str
    post_type: str
    avg_likes: float


@dataclass(frozen=True)
class DailyAverage:
    """Average likes for one calendar day."""

    date: datetime
    label: str
    avg_likes: float
