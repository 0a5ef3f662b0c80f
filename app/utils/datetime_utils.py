from datetime import datetime, timezone
import time


def get_now_utc() -> datetime:
    """Get current datetime in UTC"""
    return datetime.now(timezone.utc)


def epoch_millis() -> int:
    """Milliseconds since the epoch, used to build collision-resistant file names"""
    return int(time.time() * 1000)
