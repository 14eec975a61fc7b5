"""
Billing service layer.

Payment totals are the base monthly amount plus every extra
charge that has not been billed yet. Room rates are read from the
residents app; billing never writes outside its own tables.
"""

from .totals import (
    PaymentTotals,
    calculate_payment_total,
    default_base_amount,
    generate_receipt_number,
    record_payment,
    unbilled_charges,
)
from .receipt import render_receipt_pdf

__all__ = [
    "PaymentTotals",
    "calculate_payment_total",
    "default_base_amount",
    "generate_receipt_number",
    "record_payment",
    "unbilled_charges",
    "render_receipt_pdf",
]
