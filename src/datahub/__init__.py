from .errors import DataError
from .loader import load_daily_averages, load_like_records, load_post_type_averages
from .preprocess import prepare_derived
from .records import DailyAverage, LikeRecord, PostTypeAverage

__all__ = [
    "DataError",
    "DailyAverage",
    "LikeRecord",
    "PostTypeAverage",
    "load_daily_averages",
    "load_like_records",
    "load_post_type_averages",
    "prepare_derived",
]
