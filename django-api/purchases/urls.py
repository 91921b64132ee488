from django.urls import path

from purchases.handlers import PurchaseView

urlpatterns = [
    path("purchases", PurchaseView.as_view(), name="purchase-create"),
]
