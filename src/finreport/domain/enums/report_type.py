from enum import Enum


class ReportType(str, Enum):
    """Report types offered by the request form."""

    PROFIT_AND_LOSS = "pl"
    BALANCE_SHEET = "balance_sheet"
    CASH_FLOW = "cash_flow"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    ReportType.PROFIT_AND_LOSS: "Profit & Loss",
    ReportType.BALANCE_SHEET: "Balance Sheet",
    ReportType.CASH_FLOW: "Cash Flow Statement",
}
