from django.contrib import admin

from purchases.models import PaymentRecord, SeatReservationRecord


@admin.register(PaymentRecord)
class PaymentRecordAdmin(admin.ModelAdmin):
    list_display = ["account_id", "amount", "created_at"]
    search_fields = ["account_id"]
    readonly_fields = ["account_id", "amount", "created_at"]


@admin.register(SeatReservationRecord)
class SeatReservationRecordAdmin(admin.ModelAdmin):
    list_display = ["account_id", "seat_count", "created_at"]
    search_fields = ["account_id"]
    readonly_fields = ["account_id", "seat_count", "created_at"]
