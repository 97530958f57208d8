from datetime import datetime, timedelta

from tripboard.config import DAY_FORMAT, TIME_FORMAT

MINUTES_IN_HOUR = 60
MINUTES_IN_DAY = 24 * MINUTES_IN_HOUR


def format_duration(duration: timedelta) -> str:
    """Format a duration as '01D 02H 30M', '02H 05M' or '45M'."""
    minutes = max(int(duration.total_seconds() // 60), 0)
    days, rest = divmod(minutes, MINUTES_IN_DAY)
    hours, minutes = divmod(rest, MINUTES_IN_HOUR)
    if days:
        return f"{days:02d}D {hours:02d}H {minutes:02d}M"
    if hours:
        return f"{hours:02d}H {minutes:02d}M"
    return f"{minutes:02d}M"


def format_day(moment: datetime) -> str:
    return moment.strftime(DAY_FORMAT).upper()


def format_time(moment: datetime) -> str:
    return moment.strftime(TIME_FORMAT)
