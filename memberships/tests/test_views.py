"""
Test cases for memberships views.

Tests for:
- MembershipOfferViewSet (list)
- MembershipViewSet (own memberships only)
- PurchaseMembershipView
"""

import pytest
from decimal import Decimal
from unittest.mock import patch
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from payments.models import Payment, PaymentMethod
from memberships.models import Membership, MembershipOffer
from payments.tests.authnet_responses import (
    authnet_response,
    approved_transaction,
    created_subscription,
    declined_transaction,
)


@pytest.fixture
def api_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.mark.django_db
class TestMembershipOfferViewSet:

    def test_list_active_offers(self, api_client, offer, membership_type):
        MembershipOffer.objects.create(
            membership_type=membership_type,
            label='Retired offer',
            price_number=Decimal('5.00'),
            is_active=False
        )

        response = api_client.get(reverse('membershipoffer-list'))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data['results']) == 1
        assert response.data['results'][0]['label'] == 'Monthly membership'
        assert response.data['results'][0]['price_display'] == '$19.99'

    def test_requires_authentication(self, offer):
        response = APIClient().get(reverse('membershipoffer-list'))

        assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.django_db
class TestMembershipViewSet:

    def test_lists_only_own_memberships(self, api_client, membership, membership_type, django_user_model):
        other = django_user_model.objects.create_user(username='other', password='x')
        Membership.objects.create(membership_type=membership_type, user=other)

        response = api_client.get(reverse('membership-list'))

        assert response.status_code == status.HTTP_200_OK
        assert [m['id'] for m in response.data['results']] == [str(membership.id)]


@pytest.mark.django_db
class TestPurchaseMembershipView:
    """Tests for purchasing an offer"""

    @patch('memberships.providers.authnet.notify_billing_failure')
    def test_purchase_success(self, mock_notify, api_client, offer, payment_method, mock_http_session):
        mock_http_session.post.side_effect = [
            authnet_response(approved_transaction()),
            authnet_response(created_subscription()),
        ]

        response = api_client.post(reverse('membership-purchase'), {
            'offer_id': str(offer.id),
            'payment_method_id': str(payment_method.id),
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['outcome'] == 'subscribed'
        assert response.data['membership']['status'] == 'active'

        membership = Membership.objects.get()
        assert Payment.objects.get().membership == membership

    @patch('memberships.providers.authnet.notify_billing_failure')
    def test_purchase_declined(self, mock_notify, api_client, offer, payment_method, mock_http_session):
        mock_http_session.post.side_effect = [authnet_response(declined_transaction())]

        response = api_client.post(reverse('membership-purchase'), {
            'offer_id': str(offer.id),
            'payment_method_id': str(payment_method.id),
        }, format='json')

        assert response.status_code == status.HTTP_402_PAYMENT_REQUIRED
        assert response.data['outcome'] == 'charge_failed'
        assert response.data['membership']['status'] == 'billing_failed'
        assert Payment.objects.count() == 0

    def test_other_users_payment_method(self, api_client, offer, gateway, django_user_model, mock_http_session):
        other = django_user_model.objects.create_user(username='other', password='x')
        foreign_method = PaymentMethod.objects.create(owner=other, payment_gateway=gateway, remote_id='pm_999')

        response = api_client.post(reverse('membership-purchase'), {
            'offer_id': str(offer.id),
            'payment_method_id': str(foreign_method.id),
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'payment_method_id' in response.data
        assert Membership.objects.count() == 0
        mock_http_session.post.assert_not_called()

    def test_inactive_offer(self, api_client, offer, payment_method):
        offer.is_active = False
        offer.save()

        response = api_client.post(reverse('membership-purchase'), {
            'offer_id': str(offer.id),
            'payment_method_id': str(payment_method.id),
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'offer_id' in response.data
