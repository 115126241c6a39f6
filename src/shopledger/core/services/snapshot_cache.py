"""Monthly snapshot cache kept inside the ledger document."""

from shopledger.core.entities import LedgerDocument, MonthlySnapshot


class SnapshotCache:
    """Month key -> MonthlySnapshot. Overwritten freely, never evicted."""

    def __init__(self, document: LedgerDocument) -> None:
        self._snapshots = document.monthly_snapshots

    def get(self, month: str) -> MonthlySnapshot | None:
        return self._snapshots.get(month)

    def put(self, month: str, snapshot: MonthlySnapshot) -> None:
        self._snapshots[month] = snapshot

    def months(self) -> list[str]:
        return sorted(self._snapshots)

    def __contains__(self, month: object) -> bool:
        return month in self._snapshots

    def __len__(self) -> int:
        return len(self._snapshots)
