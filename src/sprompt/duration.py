from __future__ import annotations


def humanize(seconds: int) -> str:
    """
    Format a whole number of seconds as a compact duration string such as
    ``"1h 1s"`` or ``"2m 5s"``.  Units with a value of zero are left out, and
    a duration of zero seconds formats to the empty string.
    """
    if seconds < 0:
        raise ValueError(f"Duration must be non-negative: {seconds}")
    if seconds == 0:
        return ""
    if seconds < 60:
        return f"{seconds}s"
    if seconds < 3600:
        minutes, rest = divmod(seconds, 60)
        return f"{minutes}m {humanize(rest)}".rstrip()
    hours, rest = divmod(seconds, 3600)
    return f"{hours}h {humanize(rest)}".rstrip()
