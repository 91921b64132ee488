from purchases.handlers.views import PurchaseView

__all__ = ["PurchaseView"]
