from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Tuple

from ..core.constants import DEFAULT_TOTAL_SPACES, KEY_ATTENDANCE, KEY_PARKING
from ..storage.base import StateStorage
from ..storage.codec import parking_from_dict, parking_to_dict, record_from_dict, record_to_dict
from . import transitions
from .model import AttendanceRecord, LedgerState
from .transitions import LedgerResult

logger = logging.getLogger(__name__)


def _decode_records(raw_records: Iterable[Any]) -> Tuple[AttendanceRecord, ...]:
    """Decode stored records, skipping (and logging) entries that cannot be read."""

    records = []
    for index, raw in enumerate(raw_records):
        try:
            records.append(record_from_dict(raw))
        except (KeyError, TypeError, ValueError):
            logger.warning("Skipping unreadable attendance record #%s: %r", index, raw, exc_info=True)
    return tuple(records)


class LedgerStore:
    """Single owner of the ledger state.

    Every mutation goes through ``apply``: load, run a pure transition, persist.
    The stored ``occupiedSpaces`` is written for readers of the blob but ignored
    on load; occupancy always comes from the records. Records that fail to
    decode are left out of the loaded state and dropped on the next save.
    """

    def __init__(self, storage: StateStorage, *, default_total_spaces: int = DEFAULT_TOTAL_SPACES):
        self._storage = storage
        self._default_total = int(default_total_spaces)

    def load(self) -> LedgerState:
        raw_records = self._storage.get(KEY_ATTENDANCE, []) or []
        raw_parking = self._storage.get(KEY_PARKING, {}) or {}
        parking = parking_from_dict(raw_parking, default_total=self._default_total)
        return LedgerState(records=_decode_records(raw_records), total_spaces=parking.total_spaces)

    def save(self, state: LedgerState) -> None:
        self._storage.set(KEY_ATTENDANCE, [record_to_dict(r) for r in state.records])
        self._storage.set(KEY_PARKING, parking_to_dict(state.parking))

    def apply(self, transition: Callable[[LedgerState], LedgerResult]) -> AttendanceRecord:
        result = transition(self.load())
        self.save(result.state)
        return result.record

    def set_capacity(self, total_spaces: int) -> LedgerState:
        state = transitions.set_capacity(self.load(), total_spaces=total_spaces)
        self.save(state)
        return state
