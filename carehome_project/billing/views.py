from django.contrib.auth.decorators import login_required
from django.http import HttpResponse
from django.shortcuts import get_object_or_404

from .models import Payment
from .services.receipt import render_receipt_pdf


@login_required
def receipt_download(request, payment_id):
    payment = get_object_or_404(
        Payment.objects.select_related("resident"),
        id=payment_id,
    )

    response = HttpResponse(
        render_receipt_pdf(payment),
        content_type="application/pdf",
    )
    response["Content-Disposition"] = (
        f'attachment; filename="receipt_{payment.receipt_number}.pdf"'
    )
    return response
