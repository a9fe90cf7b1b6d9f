"""
Tests for the Authorize.Net API client.

All tests use a mocked requests session, so no request leaves the process.
"""

import codecs

import pytest
import requests
from decimal import Decimal
from unittest.mock import Mock, patch

from payments.authnet import (
    ARBCreateSubscriptionRequest,
    AuthNetException,
    Configuration,
    CreateTransactionRequest,
    CustomerProfileId,
    PaymentSchedule,
    Subscription,
)
from payments.authnet.configuration import SANDBOX_ENDPOINT, LIVE_ENDPOINT
from payments.price import Price, format_price
from payments.tests.authnet_responses import (
    authnet_response,
    approved_transaction,
    created_subscription,
    error_messages,
    sent_payload,
)


@pytest.fixture
def configuration():
    return Configuration(
        api_login='login_id',
        transaction_key='txn_key',
        client_key='client_key',
        sandbox=True
    )


@pytest.fixture
def session():
    return Mock()


@pytest.fixture
def subscription():
    subscription = Subscription(
        name='Monthly membership',
        amount='$19.99',
        amount_number=Decimal('19.99')
    )
    subscription.add_payment_schedule(PaymentSchedule(
        interval_length=1,
        interval_unit='months',
        start_date='2026-11-19'
    ))
    subscription.add_profile(CustomerProfileId(
        customer_profile_id='cust_456',
        customer_payment_profile_id='pm_123'
    ))
    return subscription


class TestConfiguration:
    """Tests for endpoint selection and credentials"""

    def test_sandbox_endpoint(self, configuration):
        assert configuration.endpoint == SANDBOX_ENDPOINT

    def test_live_endpoint(self):
        configuration = Configuration(api_login='a', transaction_key='b', sandbox=False)

        assert configuration.endpoint == LIVE_ENDPOINT

    def test_merchant_authentication(self, configuration):
        assert configuration.merchant_authentication() == {
            'name': 'login_id',
            'transactionKey': 'txn_key',
        }


class TestARBCreateSubscriptionRequest:
    """Tests for the subscription creation request"""

    def test_posts_subscription_to_endpoint(self, configuration, session, subscription):
        """Test the request body carries credentials and the subscription"""
        session.post.return_value = authnet_response(created_subscription())

        data = ARBCreateSubscriptionRequest(configuration, session, subscription).execute()

        assert data['subscriptionId'] == '9876543'
        assert session.post.call_args[0][0] == SANDBOX_ENDPOINT

        payload = sent_payload(session)
        body = payload['ARBCreateSubscriptionRequest']
        assert body['merchantAuthentication'] == {'name': 'login_id', 'transactionKey': 'txn_key'}
        assert body['subscription'] == {
            'name': 'Monthly membership',
            'paymentSchedule': {
                'interval': {'length': '1', 'unit': 'months'},
                'startDate': '2026-11-19',
                'totalOccurrences': '9999',
            },
            'amount': '19.99',
            'profile': {
                'customerProfileId': 'cust_456',
                'customerPaymentProfileId': 'pm_123',
            },
        }

    def test_element_order_follows_schema(self, configuration, session, subscription):
        """Test elements are sent in schema order"""
        session.post.return_value = authnet_response(created_subscription())

        ARBCreateSubscriptionRequest(configuration, session, subscription).execute()

        body = sent_payload(session)['ARBCreateSubscriptionRequest']
        assert list(body.keys()) == ['merchantAuthentication', 'subscription']
        assert list(body['subscription'].keys()) == ['name', 'paymentSchedule', 'amount', 'profile']

    def test_error_result_code_raises(self, configuration, session, subscription):
        """Test a rejected request raises AuthNetException with the API message"""
        session.post.return_value = authnet_response({'messages': error_messages()})

        with pytest.raises(AuthNetException) as exc_info:
            ARBCreateSubscriptionRequest(configuration, session, subscription).execute()

        assert exc_info.value.message_code == 'E00012'
        assert 'duplicate subscription' in str(exc_info.value)
        assert exc_info.value.response['messages']['resultCode'] == 'Error'

    def test_transport_error_raises(self, configuration, session, subscription):
        """Test connection failures are wrapped in AuthNetException"""
        session.post.side_effect = requests.ConnectionError('Connection refused')

        with pytest.raises(AuthNetException) as exc_info:
            ARBCreateSubscriptionRequest(configuration, session, subscription).execute()

        assert exc_info.value.message_code == 'http_error'

    def test_http_error_status_raises(self, configuration, session, subscription):
        response = authnet_response({}, status_code=500)
        response.raise_for_status.side_effect = requests.HTTPError('500 Server Error')
        session.post.return_value = response

        with pytest.raises(AuthNetException):
            ARBCreateSubscriptionRequest(configuration, session, subscription).execute()

    def test_invalid_json_raises(self, configuration, session, subscription):
        response = authnet_response({})
        response.content = b'<html>Bad gateway</html>'
        session.post.return_value = response

        with pytest.raises(AuthNetException) as exc_info:
            ARBCreateSubscriptionRequest(configuration, session, subscription).execute()

        assert exc_info.value.message_code == 'invalid_response'

    def test_non_object_json_raises(self, configuration, session, subscription):
        """Test a JSON reply that is not an object is rejected"""
        response = authnet_response({})
        response.content = codecs.BOM_UTF8 + b'[]'
        session.post.return_value = response

        with pytest.raises(AuthNetException) as exc_info:
            ARBCreateSubscriptionRequest(configuration, session, subscription).execute()

        assert exc_info.value.message_code == 'invalid_response'

    def test_half_cent_amount_rounds_up(self, configuration, session, subscription):
        """Test half-cent amounts are sent rounded the same way they are displayed"""
        session.post.return_value = authnet_response(created_subscription())
        half_cent = Subscription(
            name='Monthly membership',
            amount=format_price(Price(Decimal('19.985'), 'USD')),
            amount_number=Decimal('19.985')
        )

        ARBCreateSubscriptionRequest(configuration, session, half_cent).execute()

        body = sent_payload(session)['ARBCreateSubscriptionRequest']
        assert half_cent.amount == '$19.99'
        assert body['subscription']['amount'] == '19.99'


class TestSessionHandling:
    """Tests for the HTTP session used when none is injected"""

    @patch('payments.authnet.client.requests.Session')
    def test_short_lived_session_is_closed(self, mock_session_class, configuration, subscription):
        session = mock_session_class.return_value.__enter__.return_value
        session.post.return_value = authnet_response(created_subscription())

        data = ARBCreateSubscriptionRequest(configuration, None, subscription).execute()

        assert data['subscriptionId'] == '9876543'
        session.post.assert_called_once()
        mock_session_class.return_value.__exit__.assert_called_once()

    @patch('payments.authnet.client.requests.Session')
    def test_injected_session_is_reused(self, mock_session_class, configuration, session, subscription):
        session.post.return_value = authnet_response(created_subscription())

        ARBCreateSubscriptionRequest(configuration, session, subscription).execute()

        session.post.assert_called_once()
        mock_session_class.assert_not_called()


class TestCreateTransactionRequest:
    """Tests for the transaction request"""

    def test_ref_id_precedes_transaction(self, configuration, session):
        session.post.return_value = authnet_response(approved_transaction())

        CreateTransactionRequest(
            configuration,
            session,
            {'transactionType': 'authCaptureTransaction', 'amount': '5.00'},
            ref_id='0123456789abcdefghijklmn'
        ).execute()

        body = sent_payload(session)['createTransactionRequest']
        assert list(body.keys()) == ['merchantAuthentication', 'refId', 'transactionRequest']
        assert body['refId'] == '0123456789abcdefghij'

    def test_returns_transaction_response(self, configuration, session):
        session.post.return_value = authnet_response(approved_transaction('42'))

        data = CreateTransactionRequest(
            configuration,
            session,
            {'transactionType': 'authCaptureTransaction', 'amount': '5.00'}
        ).execute()

        assert data['transactionResponse']['transId'] == '42'
