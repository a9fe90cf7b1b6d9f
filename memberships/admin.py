"""
Django Admin configuration for the Memberships app.
"""

from django.contrib import admin
from payments.models import Payment
from payments.price import format_price
from .models import MembershipType, MembershipOffer, Membership


class MembershipOfferInline(admin.TabularInline):
    model = MembershipOffer
    extra = 0
    fields = ['label', 'price_number', 'currency_code', 'is_active']


class PaymentInline(admin.TabularInline):
    """
    Payments charged for a membership. Read-only.
    """
    model = Payment
    extra = 0
    fields = ['type', 'amount', 'currency_code', 'state', 'remote_id', 'created_at']
    readonly_fields = fields
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(MembershipType)
class MembershipTypeAdmin(admin.ModelAdmin):
    list_display = ['label', 'id', 'provider', 'updated_at']
    list_filter = ['provider']
    search_fields = ['id', 'label']
    inlines = [MembershipOfferInline]


@admin.register(MembershipOffer)
class MembershipOfferAdmin(admin.ModelAdmin):
    list_display = ['label', 'membership_type', 'price_formatted', 'is_active']
    list_filter = ['membership_type', 'is_active', 'currency_code']
    search_fields = ['label']

    def price_formatted(self, obj):
        return format_price(obj.price)
    price_formatted.short_description = 'Price'


@admin.register(Membership)
class MembershipAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'membership_type', 'offer', 'status', 'created_at']
    list_filter = ['status', 'membership_type']
    search_fields = ['user__email', 'user__username']
    raw_id_fields = ['user']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [PaymentInline]
