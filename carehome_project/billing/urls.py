from django.urls import path

from .views import receipt_download

app_name = "billing"

urlpatterns = [
    path("payments/<int:payment_id>/receipt/", receipt_download, name="receipt"),
]
