"""Submit Ports - Asset Host, Report Store, User Ledger."""

from report.application.submit.ports.asset_host import AssetHost
from report.application.submit.ports.report_store import ReportStore
from report.application.submit.ports.user_ledger import UserLedger

__all__ = ["AssetHost", "ReportStore", "UserLedger"]
