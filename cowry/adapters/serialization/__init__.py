from .codec import MoneyJsonCodec, default_codec, from_dict, from_json, to_dict, to_json
from .models import CurrencyRecord, MoneyRecord

__all__ = [
    "MoneyJsonCodec",
    "default_codec",
    "to_json",
    "from_json",
    "to_dict",
    "from_dict",
    "CurrencyRecord",
    "MoneyRecord",
]
