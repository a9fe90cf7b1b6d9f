from rest_framework import viewsets, status, views
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated, IsAdminUser
from django.shortcuts import get_object_or_404

from .models import MembershipType, MembershipOffer, Membership
from .serializers import (
    MembershipOfferSerializer,
    MembershipSerializer,
    PurchaseMembershipSerializer,
)
from .services import MembershipService


class MembershipOfferViewSet(viewsets.ReadOnlyModelViewSet):
    """
    List and retrieve membership offers available for purchase.
    """
    serializer_class = MembershipOfferSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return MembershipOffer.objects.filter(is_active=True)


class MembershipViewSet(viewsets.ReadOnlyModelViewSet):
    """
    The requesting user's memberships.
    """
    serializer_class = MembershipSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return Membership.objects.filter(user=self.request.user).select_related('offer')


class PurchaseMembershipView(views.APIView):
    """
    Purchase a membership offer with a stored payment method.

    POST /api/memberships/purchase/
    Request body:
        - offer_id (UUID): Offer to purchase
        - payment_method_id (UUID): Payment method owned by the user

    Response:
        - membership: The created membership
        - outcome (str): 'subscribed', 'charge_failed' or 'subscription_failed'
    """
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = PurchaseMembershipSerializer(
            data=request.data,
            context={'request': request}
        )
        serializer.is_valid(raise_exception=True)

        membership, result = MembershipService.purchase(
            user=request.user,
            offer=serializer.validated_data['offer_id'],
            payment_method=serializer.validated_data['payment_method_id'],
        )

        data = {
            'membership': MembershipSerializer(membership).data,
            'outcome': result.outcome.value if result else None,
        }

        if result is not None and not result.success:
            data['error'] = 'Billing for this membership failed.'
            return Response(data, status=status.HTTP_402_PAYMENT_REQUIRED)

        return Response(data, status=status.HTTP_201_CREATED)


class ProviderConfigurationView(views.APIView):
    """
    Read or change the provider configuration of a membership type.

    GET /api/memberships/types/<id>/provider-configuration/
    PUT /api/memberships/types/<id>/provider-configuration/
    """
    permission_classes = [IsAdminUser]

    def get(self, request, membership_type_id):
        membership_type = get_object_or_404(MembershipType, id=membership_type_id)
        provider = membership_type.get_provider()
        serializer = provider.get_configuration_serializer()

        data = {
            'provider': membership_type.provider,
            'configuration': provider.get_configuration(),
        }
        if serializer is not None:
            data['options'] = {
                name: [{'value': value, 'label': label} for value, label in field.choices.items()]
                for name, field in serializer.fields.items()
                if hasattr(field, 'choices')
            }
            data['warning'] = getattr(serializer, 'warning', None)

        return Response(data)

    def put(self, request, membership_type_id):
        membership_type = get_object_or_404(MembershipType, id=membership_type_id)
        provider = membership_type.get_provider()

        serializer = provider.validate_configuration(request.data)
        if serializer is None:
            return Response(
                {'error': f'Provider {membership_type.provider} has no configuration'},
                status=status.HTTP_400_BAD_REQUEST
            )
        if serializer.errors:
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        provider.submit_configuration(serializer)
        membership_type.provider_configuration = provider.get_configuration()
        membership_type.save(update_fields=['provider_configuration', 'updated_at'])

        return Response({
            'provider': membership_type.provider,
            'configuration': membership_type.provider_configuration,
        })
