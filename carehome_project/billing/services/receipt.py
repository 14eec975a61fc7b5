from decimal import Decimal

from django.conf import settings
from django.utils import timezone
from fpdf import FPDF
from fpdf.enums import XPos, YPos


def _money(value):
    return f"Rs. {Decimal(value):,.2f}"


def _line(pdf, label, value, width=45):
    pdf.set_font("Helvetica", "B", 11)
    pdf.cell(width, 8, text=label)
    pdf.set_font("Helvetica", "", 11)
    pdf.cell(0, 8, text=str(value), new_x=XPos.LMARGIN, new_y=YPos.NEXT)


def render_receipt_pdf(payment):
    """
    Render a payment receipt and return the PDF bytes.

    The base line is the payment amount minus the extra charges
    billed with it.
    """
    charges = list(payment.extra_charges.order_by("date_charged", "id"))
    extras_total = sum((c.amount for c in charges), Decimal("0"))
    base_amount = payment.amount - extras_total

    pdf = FPDF()
    pdf.add_page()
    pdf.set_auto_page_break(auto=True, margin=20)

    # HEADER
    pdf.set_font("Helvetica", "B", 18)
    pdf.cell(0, 12, text=settings.FACILITY_NAME, align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.set_font("Helvetica", "B", 14)
    pdf.cell(0, 10, text="PAYMENT RECEIPT", align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.set_font("Helvetica", "", 11)
    pdf.cell(0, 8, text=f"Receipt #{payment.receipt_number}", align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.ln(6)

    # DETAILS
    _line(pdf, "Resident:", payment.resident.full_name)
    _line(pdf, "Date:", f"{payment.payment_date:%d/%m/%Y}")
    _line(pdf, "For Month:", payment.month_year or "-")
    _line(pdf, "Method:", payment.get_payment_method_display().upper())
    pdf.ln(4)

    # ITEMS
    pdf.set_font("Helvetica", "B", 11)
    pdf.cell(100, 8, text="Description", border="B")
    pdf.cell(40, 8, text="Date", border="B")
    pdf.cell(0, 8, text="Amount", border="B", align="R", new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    pdf.set_font("Helvetica", "", 11)
    pdf.cell(100, 8, text="Monthly Rent/Charges")
    pdf.cell(40, 8, text="-")
    pdf.cell(0, 8, text=_money(base_amount), align="R", new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    if charges:
        pdf.ln(2)
        pdf.set_font("Helvetica", "B", 10)
        pdf.cell(0, 8, text="ADDITIONAL CHARGES", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_font("Helvetica", "", 11)
        for charge in charges:
            pdf.cell(100, 8, text=f"{charge.description} ({charge.get_category_display()})")
            pdf.cell(40, 8, text=f"{charge.date_charged:%d/%m/%Y}")
            pdf.cell(0, 8, text=_money(charge.amount), align="R", new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    # TOTAL
    pdf.ln(2)
    pdf.set_font("Helvetica", "B", 12)
    pdf.cell(140, 10, text="TOTAL:", border="T", align="R")
    pdf.cell(0, 10, text=_money(payment.amount), border="T", align="R", new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    if payment.notes:
        pdf.ln(4)
        pdf.set_font("Helvetica", "I", 10)
        pdf.multi_cell(0, 6, text=f"Notes: {payment.notes}", new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    # FOOTER
    pdf.ln(10)
    pdf.set_font("Helvetica", "", 9)
    pdf.cell(0, 6, text="This is a computer-generated receipt.", align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.cell(
        0, 6,
        text=f"Generated on {timezone.localtime():%d/%m/%Y %H:%M}",
        align="C",
        new_x=XPos.LMARGIN,
        new_y=YPos.NEXT,
    )

    return bytes(pdf.output())
