"""Scheduled alert checks (SSD-free countdown and profit targets)."""

from propfolio.alerts.base import AlertCheckResult, Notifier
from propfolio.alerts.profit_check import build_profit_alert, run_profit_check
from propfolio.alerts.ssd_check import build_ssd_alert, run_ssd_check

__all__ = [
    "AlertCheckResult",
    "Notifier",
    "build_profit_alert",
    "build_ssd_alert",
    "run_profit_check",
    "run_ssd_check",
]
