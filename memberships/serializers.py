from rest_framework import serializers

from payments.gateways import AuthorizeNetGateway
from payments.gateways.factory import GATEWAY_REGISTRY
from payments.models import PaymentGateway, PaymentMethod
from payments.price import format_price
from .models import MembershipOffer, Membership

GATEWAY_REQUIRED_MESSAGE = 'An Authorize.Net gateway is required.'
NO_GATEWAYS_MESSAGE = 'No Authorize.Net gateways are configured.'


def authnet_gateway_choices():
    """Enabled payment gateways backed by an Authorize.Net plugin"""
    plugin_ids = [
        plugin_id for plugin_id, gateway_class in GATEWAY_REGISTRY.items()
        if issubclass(gateway_class, AuthorizeNetGateway)
    ]
    return [
        (gateway.id, gateway.label)
        for gateway in PaymentGateway.objects.filter(plugin__in=plugin_ids, status=True)
    ]


class AuthnetConfigurationSerializer(serializers.Serializer):
    """
    Configuration of the Authorize.Net membership provider.
    A single required choice of payment gateway.
    """
    gateway = serializers.ChoiceField(
        choices=[],
        allow_blank=True,
        error_messages={
            'required': GATEWAY_REQUIRED_MESSAGE,
            'null': GATEWAY_REQUIRED_MESSAGE,
        },
        help_text="Payment gateway used for charges and subscriptions"
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['gateway'].choices = authnet_gateway_choices()

    @property
    def warning(self):
        if not self.fields['gateway'].choices:
            return NO_GATEWAYS_MESSAGE
        return None

    def validate_gateway(self, value):
        if not value:
            raise serializers.ValidationError(GATEWAY_REQUIRED_MESSAGE)
        return value


class MembershipOfferSerializer(serializers.ModelSerializer):
    """
    Serializer for membership offers.
    Includes the formatted price.
    """
    price_display = serializers.SerializerMethodField()

    class Meta:
        model = MembershipOffer
        fields = [
            'id',
            'membership_type',
            'label',
            'price_number',
            'currency_code',
            'price_display',
            'is_active',
        ]
        read_only_fields = fields

    def get_price_display(self, obj):
        return format_price(obj.price)


class MembershipSerializer(serializers.ModelSerializer):
    offer = MembershipOfferSerializer(read_only=True)
    status_display = serializers.CharField(
        source='get_status_display',
        read_only=True
    )

    class Meta:
        model = Membership
        fields = [
            'id',
            'membership_type',
            'offer',
            'status',
            'status_display',
            'created_at',
        ]
        read_only_fields = fields


class PurchaseMembershipSerializer(serializers.Serializer):
    """
    Input for purchasing a membership offer with a stored payment method.
    """
    offer_id = serializers.UUIDField()
    payment_method_id = serializers.UUIDField()

    def validate_offer_id(self, value):
        try:
            return MembershipOffer.objects.select_related('membership_type').get(id=value, is_active=True)
        except MembershipOffer.DoesNotExist:
            raise serializers.ValidationError("Offer not found or not available.")

    def validate_payment_method_id(self, value):
        user = self.context['request'].user
        try:
            return PaymentMethod.objects.select_related('payment_gateway').get(id=value, owner=user)
        except PaymentMethod.DoesNotExist:
            raise serializers.ValidationError("Payment method not found.")
