from .parser import combine, parse_date, parse_time, parse_timestamp

__all__ = [
    "combine",
    "parse_date",
    "parse_time",
    "parse_timestamp",
]
