from datetime import datetime
from dateutil.relativedelta import relativedelta

# Calendar length of one billing period per plan interval
INTERVAL_STEPS: dict[str, relativedelta] = {
    "monthly": relativedelta(months=1),
    "quarterly": relativedelta(months=3),
    "half_yearly": relativedelta(months=6),
    "yearly": relativedelta(years=1),
}

def compute_period_end(start: datetime, interval: str) -> datetime:
    """
    End of the billing period that begins at `start`.

    relativedelta clamps to the last valid day of the target month,
    so 2024-01-31 + 1 month is 2024-02-29 (not March 2).

    Raises ValueError for an unknown interval, or when the period would end
    past datetime.max (year 9999).
    """
    try:
        step = INTERVAL_STEPS[interval]
    except KeyError:
        raise ValueError(f"Unknown plan interval: {interval!r}") from None
    try:
        return start + step
    except (ValueError, OverflowError):
        raise ValueError(
            f"Billing period starting {start.isoformat()} ({interval}) ends past year 9999"
        ) from None
