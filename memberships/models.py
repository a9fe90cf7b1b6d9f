import uuid
from django.conf import settings
from django.db import models

from payments.price import Price


class MembershipType(models.Model):
    """
    A kind of membership, billed through one membership provider.

    ``provider`` selects the provider plugin from
    ``memberships.providers.PROVIDER_REGISTRY``; ``provider_configuration``
    is that plugin's stored configuration.
    """
    id = models.SlugField(
        primary_key=True,
        max_length=100,
        help_text="Machine name of the membership type"
    )
    label = models.CharField(max_length=255)
    provider = models.CharField(
        max_length=100,
        default='authnet',
        help_text="Membership provider plugin id"
    )
    provider_configuration = models.JSONField(
        default=dict,
        blank=True,
        help_text="Provider plugin configuration"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['label']
        verbose_name = 'Membership Type'
        verbose_name_plural = 'Membership Types'

    def __str__(self):
        return self.label

    def get_provider(self):
        """Instantiate the provider plugin with the stored configuration"""
        from .providers import get_provider

        return get_provider(self.provider, self.provider_configuration)


class MembershipOffer(models.Model):
    """
    A priced plan that can be purchased for a membership type.
    The price drives both the initial charge and the recurring amount.
    """
    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    membership_type = models.ForeignKey(
        MembershipType,
        on_delete=models.CASCADE,
        related_name='offers'
    )
    label = models.CharField(
        max_length=255,
        help_text="Display name of the offer (e.g., 'Monthly membership')"
    )
    price_number = models.DecimalField(max_digits=19, decimal_places=6)
    currency_code = models.CharField(
        max_length=3,
        default='USD',
        help_text="Currency code (ISO 4217)"
    )
    is_active = models.BooleanField(
        default=True,
        help_text="Whether this offer is available for purchase"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['price_number']
        verbose_name = 'Membership Offer'
        verbose_name_plural = 'Membership Offers'

    def __str__(self):
        return self.label

    @property
    def price(self) -> Price:
        return Price(self.price_number, self.currency_code)


class Membership(models.Model):
    """
    A user's membership, created when an offer is purchased.
    """
    STATUS_CHOICES = [
        ('pending', 'Pending'),
        ('active', 'Active'),
        ('billing_failed', 'Billing failed'),
    ]

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    membership_type = models.ForeignKey(
        MembershipType,
        on_delete=models.PROTECT,
        related_name='memberships'
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='memberships',
        help_text="Account holder"
    )
    offer = models.ForeignKey(
        MembershipOffer,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='memberships'
    )
    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default='pending'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        verbose_name = 'Membership'
        verbose_name_plural = 'Memberships'
        indexes = [
            models.Index(fields=['user', 'status'], name='membership_user_status_idx'),
        ]

    def __str__(self):
        return f"{self.user} - {self.membership_type} ({self.status})"

    def is_active(self):
        return self.status == 'active'
