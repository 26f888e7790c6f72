from .time import time_between, to_datetime, to_unix_timestamp

__all__ = ["time_between", "to_datetime", "to_unix_timestamp"]
