"""
Django Admin configuration for the Payments app.
"""

from django.contrib import admin
from .models import PaymentGateway, RemoteCustomer, PaymentMethod, Payment


@admin.register(PaymentGateway)
class PaymentGatewayAdmin(admin.ModelAdmin):
    list_display = ['label', 'id', 'plugin', 'mode', 'status', 'updated_at']
    list_filter = ['plugin', 'mode', 'status']
    search_fields = ['id', 'label']


@admin.register(RemoteCustomer)
class RemoteCustomerAdmin(admin.ModelAdmin):
    list_display = ['user', 'provider', 'remote_id', 'created_at']
    search_fields = ['user__email', 'remote_id']
    raw_id_fields = ['user']


@admin.register(PaymentMethod)
class PaymentMethodAdmin(admin.ModelAdmin):
    list_display = ['__str__', 'owner', 'payment_gateway', 'remote_id', 'is_reusable', 'created_at']
    list_filter = ['payment_gateway', 'type', 'is_reusable']
    search_fields = ['owner__email', 'remote_id']
    raw_id_fields = ['owner']


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    """
    Payments are created by gateway plugins; the admin is read-mostly.
    """
    list_display = ['id', 'type', 'amount', 'currency_code', 'state', 'payment_gateway', 'membership', 'created_at']
    list_filter = ['type', 'state', 'payment_gateway']
    search_fields = ['remote_id', 'membership__user__email']
    readonly_fields = ['remote_id', 'remote_state', 'completed_at', 'created_at', 'updated_at']
    raw_id_fields = ['payment_method', 'membership']
