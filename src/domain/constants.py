"""Domain constants for the ERP financial dashboard."""

ENTRY_TYPE_REVENUE = "revenue"
ENTRY_TYPE_EXPENSE = "expense"

# Backend ``tipo`` codes for ledger entries and categories.
BACKEND_ENTRY_TYPES = {
    "receita": ENTRY_TYPE_REVENUE,
    "despesa": ENTRY_TYPE_EXPENSE,
}

STATUS_PENDING = "pendente"
STATUS_PAID = "pago"
STATUS_RECEIVED = "recebido"
STATUS_OVERDUE = "vencido"
STATUS_CANCELLED = "cancelado"
STATUS_COMPLETED = "concluida"
STATUS_COMPLETED_ACCENTED = "concluída"

# Statuses counted as realized by the income statement and the estimate.
SETTLED_STATUSES = (
    STATUS_COMPLETED,
    STATUS_PAID,
    STATUS_RECEIVED,
    STATUS_COMPLETED_ACCENTED,
)
# Statuses counted by the cash flow and cash position panels.
CASH_STATUSES = (STATUS_COMPLETED, STATUS_PAID, STATUS_RECEIVED)
CASH_EXPENSE_STATUSES = (STATUS_COMPLETED, STATUS_PAID)

FORECAST_REVENUE_SETTLED = SETTLED_STATUSES
FORECAST_EXPENSE_SETTLED = (
    STATUS_COMPLETED,
    STATUS_PAID,
    STATUS_COMPLETED_ACCENTED,
)

SALES_DRAFT = "draft"
SALES_CONFIRMED = "confirmed"
SALES_DELIVERED = "delivered"
SALES_CANCELLED = "cancelled"
REVENUE_SALES_STATUSES = (SALES_CONFIRMED, SALES_DELIVERED)

DRE_OPERATING_EXPENSE = "despesa_operacional"
DRE_FIXED_COST = "custo_fixo"
DRE_VARIABLE_COST = "custo_variavel"

SALES_BUCKET_KEY = "sales"
SALES_BUCKET_NAME = "Product/Service Sales"
OTHER_REVENUE_KEY = "other"
OTHER_REVENUE_NAME = "Other Revenue"
GENERAL_EXPENSE_KEY = "general"
GENERAL_OPERATING_EXPENSE_NAME = "General Operating Expenses"
GENERAL_FIXED_COST_NAME = "General Fixed Costs"

OVERDUE_WINDOWS = {
    "all": None,
    "7days": 7,
    "30days": 30,
    "90days": 90,
}


__all__ = [
    "ENTRY_TYPE_REVENUE",
    "ENTRY_TYPE_EXPENSE",
    "BACKEND_ENTRY_TYPES",
    "STATUS_PENDING",
    "STATUS_PAID",
    "STATUS_RECEIVED",
    "STATUS_OVERDUE",
    "STATUS_CANCELLED",
    "STATUS_COMPLETED",
    "STATUS_COMPLETED_ACCENTED",
    "SETTLED_STATUSES",
    "CASH_STATUSES",
    "CASH_EXPENSE_STATUSES",
    "FORECAST_REVENUE_SETTLED",
    "FORECAST_EXPENSE_SETTLED",
    "SALES_DRAFT",
    "SALES_CONFIRMED",
    "SALES_DELIVERED",
    "SALES_CANCELLED",
    "REVENUE_SALES_STATUSES",
    "DRE_OPERATING_EXPENSE",
    "DRE_FIXED_COST",
    "DRE_VARIABLE_COST",
    "SALES_BUCKET_KEY",
    "SALES_BUCKET_NAME",
    "OTHER_REVENUE_KEY",
    "OTHER_REVENUE_NAME",
    "GENERAL_EXPENSE_KEY",
    "GENERAL_OPERATING_EXPENSE_NAME",
    "GENERAL_FIXED_COST_NAME",
    "OVERDUE_WINDOWS",
]
