from scanner.models import Trend

# Percentage points; the boundary values themselves are neutral
TREND_THRESHOLD = 0.1


def classify_trend(change_percent: float) -> Trend:
    if change_percent > TREND_THRESHOLD:
        return Trend.BULLISH
    if change_percent < -TREND_THRESHOLD:
        return Trend.BEARISH
    return Trend.NEUTRAL
