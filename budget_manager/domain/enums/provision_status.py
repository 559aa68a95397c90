"""引当ステータスの列挙型."""
from enum import Enum


class ProvisionStatus(Enum):
    """引当のステータス.

    OPEN で作成され、紐づく支出の合計が引当額に達すると CLOSED になる。
    """

    OPEN = "OPEN"
    CLOSED = "CLOSED"

    def get_display_name(self) -> str:
        """日本語表示名を返す."""
        names = {
            ProvisionStatus.OPEN: "未消化",
            ProvisionStatus.CLOSED: "消化済",
        }
        return names[self]
