from typing import Iterable, Optional

from mywx_pusher.types import ConditionRecord

# data_structure_type values reported by station sources. The controller's own
# indoor record (type 4) is not read; indoor values come from the indoor
# air quality unit.
PRIMARY_SENSOR = 1
BAROMETER = 3
AIR_QUALITY = 6


def select_record(records: Iterable[ConditionRecord], record_type: int) -> Optional[ConditionRecord]:
    """Return the first record of the given type, or None when there is none"""
    for record in records:
        if record.get("data_structure_type") == record_type:
            return record
    return None
