from decimal import Decimal
from unittest.mock import Mock

import pytest
from django.contrib.auth import get_user_model

from payments.models import PaymentGateway, PaymentMethod, RemoteCustomer
from memberships.models import MembershipType, MembershipOffer, Membership


@pytest.fixture
def user(db):
    """A regular account holder"""
    return get_user_model().objects.create_user(
        username='member',
        email='member@example.com',
        password='testpass123'
    )


@pytest.fixture
def gateway(db):
    """A sandbox Authorize.Net gateway"""
    return PaymentGateway.objects.create(
        id='authnet_sandbox',
        label='Authorize.Net (sandbox)',
        plugin='authorizenet_acceptjs',
        mode='test',
        configuration={
            'api_login': 'login_id',
            'transaction_key': 'txn_key',
            'client_key': 'client_key',
        }
    )


@pytest.fixture
def remote_customer(user, gateway):
    return RemoteCustomer.objects.create(
        user=user,
        provider='authnet_sandbox|test',
        remote_id='cust_456'
    )


@pytest.fixture
def payment_method(user, gateway, remote_customer):
    return PaymentMethod.objects.create(
        owner=user,
        payment_gateway=gateway,
        remote_id='pm_123',
        card_type='visa',
        card_number='1111'
    )


@pytest.fixture
def membership_type(gateway):
    return MembershipType.objects.create(
        id='standard',
        label='Standard membership',
        provider='authnet',
        provider_configuration={'gateway': gateway.id}
    )


@pytest.fixture
def offer(membership_type):
    return MembershipOffer.objects.create(
        membership_type=membership_type,
        label='Monthly membership',
        price_number=Decimal('19.99'),
        currency_code='USD'
    )


@pytest.fixture
def membership(user, membership_type, offer):
    return Membership.objects.create(
        membership_type=membership_type,
        user=user,
        offer=offer
    )


@pytest.fixture
def mock_http_session():
    """requests.Session stand-in shared by every Authorize.Net plugin instance"""
    from payments.gateways.authorizenet import AuthorizeNetGateway

    session = Mock()
    original = AuthorizeNetGateway.http_session
    AuthorizeNetGateway.http_session = session
    yield session
    AuthorizeNetGateway.http_session = original
