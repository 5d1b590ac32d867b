"""Volume-trend engine: period resolution, bucketing and series building."""

from app.trends.buckets import aggregate, bucket_key
from app.trends.periods import resolve_period
from app.trends.series import build_series, percentage_change

__all__ = ["aggregate", "bucket_key", "build_series", "percentage_change", "resolve_period"]
