"""引当リポジトリのインメモリ実装."""
import copy
import threading

from budget_manager.domain.entities import Provision
from budget_manager.domain.identifiers import CategoryId, ProvisionId
from budget_manager.domain.ports import ProvisionRepository


class InMemoryProvisionRepository(ProvisionRepository):
    """引当リポジトリのインメモリ実装.

    保存・取得はコピーで行い、呼び出し側の変更が保存済みの状態に
    直接反映されないようにする。
    """

    def __init__(self) -> None:
        """初期化."""
        self._provisions: dict[str, Provision] = {}
        self._lock = threading.Lock()

    def save(self, provision: Provision) -> None:
        """引当を保存する."""
        with self._lock:
            provision.version += 1
            self._provisions[provision.provision_id.value] = copy.copy(provision)

    def save_if_unchanged(self, provision: Provision, expected_version: int) -> bool:
        """保存済みの version が一致する場合のみ保存する."""
        with self._lock:
            stored = self._provisions.get(provision.provision_id.value)
            current_version = stored.version if stored is not None else 0
            if current_version != expected_version:
                return False
            provision.version = expected_version + 1
            self._provisions[provision.provision_id.value] = copy.copy(provision)
            return True

    def find_by_id(self, provision_id: ProvisionId) -> Provision | None:
        """引当IDで検索する."""
        with self._lock:
            stored = self._provisions.get(provision_id.value)
            return copy.copy(stored) if stored is not None else None

    def find_all(self) -> list[Provision]:
        """すべての引当を取得する（期日の早い順）."""
        with self._lock:
            provisions = [copy.copy(p) for p in self._provisions.values()]
        return sorted(provisions, key=lambda p: p.due_date)

    def find_by_category_id(self, category_id: CategoryId) -> list[Provision]:
        """カテゴリIDで検索する（期日の早い順）."""
        return [p for p in self.find_all() if p.category_id == category_id]

    def find_open(self) -> list[Provision]:
        """未消化の引当を取得する（期日の早い順）."""
        return [p for p in self.find_all() if p.is_open()]

    def delete(self, provision_id: ProvisionId) -> None:
        """引当を削除する."""
        with self._lock:
            self._provisions.pop(provision_id.value, None)
