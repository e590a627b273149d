from .metrics import (
    AccountTotals,
    CashFlowPoint,
    DashboardSummary,
    account_totals,
    agenda,
    cash_flow_series,
    clients_with_birthday,
    compute_dashboard,
    count_appointments_on,
    count_low_stock,
    count_vip_clients,
    ledger,
    low_stock_products,
    monthly_income,
    search_clients,
)

__all__ = [
    "AccountTotals",
    "CashFlowPoint",
    "DashboardSummary",
    "account_totals",
    "agenda",
    "cash_flow_series",
    "clients_with_birthday",
    "compute_dashboard",
    "count_appointments_on",
    "count_low_stock",
    "count_vip_clients",
    "ledger",
    "low_stock_products",
    "monthly_income",
    "search_clients",
]
