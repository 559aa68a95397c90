"""値オブジェクトモジュール."""
from .money import Money
from .period import Period
from .executive_summary import SEMESTER_MONTHS, ExecutiveSummary
from .provision_fulfillment_report import ProvisionFulfillmentReport

__all__ = [
    "ExecutiveSummary",
    "Money",
    "Period",
    "ProvisionFulfillmentReport",
    "SEMESTER_MONTHS",
]
