import uuid
from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models

from .price import Price


class PaymentGateway(models.Model):
    """
    A configured integration with a remote payment processor.

    The ``plugin`` field selects the gateway implementation from the
    registry in ``payments.gateways.factory``; ``configuration`` holds the
    plugin's credentials.
    """
    MODE_CHOICES = [
        ('test', 'Test'),
        ('live', 'Live'),
    ]

    id = models.SlugField(
        primary_key=True,
        max_length=100,
        help_text="Machine name of the gateway (e.g., 'authnet_sandbox')"
    )
    label = models.CharField(
        max_length=255,
        help_text="Display name of the gateway"
    )
    plugin = models.CharField(
        max_length=100,
        help_text="Gateway implementation (e.g., 'authorizenet_acceptjs')"
    )
    mode = models.CharField(
        max_length=10,
        choices=MODE_CHOICES,
        default='test',
        help_text="Whether the gateway talks to the sandbox or the live processor"
    )
    configuration = models.JSONField(
        default=dict,
        blank=True,
        help_text="Plugin credentials and settings"
    )
    status = models.BooleanField(
        default=True,
        help_text="Whether the gateway is enabled"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['label']
        verbose_name = 'Payment Gateway'
        verbose_name_plural = 'Payment Gateways'

    def __str__(self):
        return self.label

    def get_plugin(self):
        """Return the gateway plugin configured by this record"""
        from .gateways.factory import get_gateway_class

        gateway_class = get_gateway_class(self.plugin)
        return gateway_class(
            gateway_id=self.id,
            configuration=self.configuration,
            mode=self.mode
        )


class RemoteCustomer(models.Model):
    """
    Processor-side customer profile id of a user.

    ``provider`` is '<gateway id>|<mode>' so sandbox and live ids are kept apart.
    """
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='remote_customers'
    )
    provider = models.CharField(max_length=150)
    remote_id = models.CharField(
        max_length=255,
        help_text="Customer profile id at the processor"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = ['user', 'provider']
        verbose_name = 'Remote Customer'
        verbose_name_plural = 'Remote Customers'

    def __str__(self):
        return f"{self.user} @ {self.provider}: {self.remote_id}"


class PaymentMethod(models.Model):
    """
    A stored payment instrument, tokenized at the processor.

    ``remote_id`` is the processor's payment profile id; card data never
    reaches this database.
    """
    TYPE_CHOICES = [
        ('credit_card', 'Credit Card'),
        ('bank_account', 'Bank Account'),
    ]

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='payment_methods',
        help_text="User who owns this payment method"
    )
    payment_gateway = models.ForeignKey(
        PaymentGateway,
        on_delete=models.PROTECT,
        related_name='payment_methods'
    )
    type = models.CharField(
        max_length=50,
        choices=TYPE_CHOICES,
        default='credit_card'
    )
    remote_id = models.CharField(
        max_length=255,
        blank=True,
        help_text="Payment profile id at the processor"
    )
    card_type = models.CharField(max_length=50, blank=True)
    card_number = models.CharField(
        max_length=4,
        blank=True,
        help_text="Last 4 digits of the card"
    )
    is_reusable = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        verbose_name = 'Payment Method'
        verbose_name_plural = 'Payment Methods'

    def __str__(self):
        if self.card_number:
            return f"{self.card_type or self.get_type_display()} ending in {self.card_number}"
        return self.get_type_display()

    def get_payment_gateway_id(self):
        return self.payment_gateway_id


class Payment(models.Model):
    """
    A single charge against a payment method.

    Payments of type ``authnet_subscription`` are the initial charge of a
    membership subscription and must reference that membership.
    """
    TYPE_CHOICES = [
        ('payment_default', 'Default'),
        ('authnet_subscription', 'Authorize.net Subscription Payment'),
    ]

    STATE_CHOICES = [
        ('new', 'New'),
        ('authorization', 'Authorization'),
        ('completed', 'Completed'),
        ('authorization_voided', 'Authorization voided'),
    ]

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    type = models.CharField(
        max_length=50,
        choices=TYPE_CHOICES,
        default='payment_default'
    )
    payment_gateway = models.ForeignKey(
        PaymentGateway,
        on_delete=models.PROTECT,
        related_name='payments'
    )
    payment_method = models.ForeignKey(
        PaymentMethod,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='payments'
    )
    amount = models.DecimalField(max_digits=19, decimal_places=6)
    currency_code = models.CharField(
        max_length=3,
        help_text="Currency code (ISO 4217)"
    )
    state = models.CharField(
        max_length=50,
        choices=STATE_CHOICES,
        default='new'
    )
    remote_id = models.CharField(
        max_length=255,
        blank=True,
        help_text="Transaction id at the processor"
    )
    remote_state = models.CharField(max_length=255, blank=True)
    membership = models.ForeignKey(
        'memberships.Membership',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='payments',
        help_text="The related membership"
    )
    completed_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        verbose_name = 'Payment'
        verbose_name_plural = 'Payments'
        indexes = [
            models.Index(fields=['type', 'state'], name='payment_type_state_idx'),
            models.Index(fields=['remote_id'], name='payment_remote_id_idx'),
        ]

    def __str__(self):
        return f"{self.get_type_display()} {self.price} ({self.state})"

    @property
    def price(self):
        return Price(self.amount, self.currency_code)

    @price.setter
    def price(self, value: Price):
        self.amount = value.number
        self.currency_code = value.currency_code

    def clean(self):
        if self.type == 'authnet_subscription' and not self.membership_id:
            raise ValidationError({'membership': 'Subscription payments must reference a membership.'})
