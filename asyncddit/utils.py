from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

JsonType = Union[Dict[str, Any], List[Any]]


def timestamp(value: Optional[Union[int, float, bool]]) -> Optional[datetime]:
    """
    Converts a Reddit epoch timestamp into an aware UTC datetime.

    Reddit uses `False` in place of a timestamp for things that were never edited,
    for which `None` is returned.
    """
    if value is None or isinstance(value, bool):
        return None
    return datetime.fromtimestamp(value, tz=timezone.utc)


def form_value(value: Any) -> str:
    # the API only understands lowercase booleans
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        # IntEnum members included
        return str(int(value))
    return str(value)
