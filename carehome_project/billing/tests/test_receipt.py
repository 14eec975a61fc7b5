from datetime import date
from decimal import Decimal

import pytest
from django.urls import reverse

from billing.services import record_payment, render_receipt_pdf


@pytest.fixture
def payment(make_resident, make_charge):
    resident = make_resident(full_name="Asha Rao")
    make_charge(resident, "500.00", description="Physiotherapy", category="medical")
    return record_payment(
        resident=resident,
        base_amount=Decimal("15000.00"),
        payment_date=date(2025, 3, 5),
        notes="Paid by daughter",
    )


@pytest.mark.django_db
def test_render_receipt_pdf_returns_pdf_bytes(payment):
    content = render_receipt_pdf(payment)

    assert isinstance(content, bytes)
    assert content.startswith(b"%PDF")


@pytest.mark.django_db
def test_receipt_download_view(staff_client, payment):
    response = staff_client.get(reverse("billing:receipt", args=[payment.pk]))

    assert response.status_code == 200
    assert response["Content-Type"] == "application/pdf"
    assert payment.receipt_number in response["Content-Disposition"]
    assert response.content.startswith(b"%PDF")


@pytest.mark.django_db
def test_receipt_download_unknown_payment(staff_client):
    response = staff_client.get(reverse("billing:receipt", args=[999]))

    assert response.status_code == 404
