from .records import RoundRecord, StoreFormatError, pop_unfinished, utc_now_iso
from .json_store import JsonRoundStore

__all__ = ["RoundRecord", "StoreFormatError", "pop_unfinished", "utc_now_iso", "JsonRoundStore"]
