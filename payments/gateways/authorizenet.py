"""
Authorize.Net on-site gateway plugin.

Charges customer payment profiles created through Accept.js/CIM and exposes
the merchant credentials needed by other Authorize.Net integrations
(e.g. recurring billing).
"""

import logging
from typing import Optional, Dict, Any

from django.utils import timezone

from payments.authnet import AuthNetException, Configuration, CreateTransactionRequest
from payments.price import quantize_amount
from .base import BasePaymentGateway, PaymentGatewayException, DeclineException, HardDeclineException

logger = logging.getLogger(__name__)

# transactionResponse.responseCode values
RESPONSE_APPROVED = '1'
RESPONSE_DECLINED = '2'
RESPONSE_ERROR = '3'
RESPONSE_HELD = '4'

# Decline reason codes that will not succeed on retry: pick-up card and
# fraud-filter rejections.
HARD_DECLINE_REASON_CODES = {'4', '41', '250', '251'}


class AuthorizeNetGateway(BasePaymentGateway):
    """
    Authorize.Net gateway implementation.

    Configuration keys: ``api_login``, ``transaction_key``, ``client_key``.
    """

    # requests.Session used for API calls; a short-lived session per call when None
    http_session = None

    def default_configuration(self) -> Dict[str, Any]:
        return {
            'api_login': '',
            'transaction_key': '',
            'client_key': '',
        }

    def get_authnet_configuration(self) -> Configuration:
        """Build the API configuration from the stored credentials and mode"""
        return Configuration(
            sandbox=(self.get_mode() == 'test'),
            api_login=self.configuration['api_login'],
            transaction_key=self.configuration['transaction_key'],
            client_key=self.configuration['client_key'],
        )

    def get_remote_customer_id(self, owner) -> Optional[str]:
        from payments.models import RemoteCustomer

        if owner is None or owner.pk is None:
            return None
        return RemoteCustomer.objects.filter(
            user=owner,
            provider=self.get_remote_provider_key()
        ).values_list('remote_id', flat=True).first()

    def create_payment(self, payment, capture: bool = True):
        """
        Charge the customer payment profile behind ``payment.payment_method``.

        Sets remote_id, remote_state and state on the payment; does not save it.
        """
        payment_method = payment.payment_method
        if payment_method is None:
            raise PaymentGatewayException(
                message="The provided payment has no payment method referenced.",
                error_code='payment_method_missing'
            )
        if not payment_method.remote_id:
            raise PaymentGatewayException(
                message="The payment method has no remote payment profile.",
                error_code='payment_profile_missing'
            )

        customer_profile_id = self.get_remote_customer_id(payment_method.owner)
        if not customer_profile_id:
            raise PaymentGatewayException(
                message="The payment method owner has no remote customer profile.",
                error_code='customer_profile_missing'
            )

        transaction_request = {
            'transactionType': 'authCaptureTransaction' if capture else 'authOnlyTransaction',
            'amount': str(quantize_amount(payment.amount)),
            'profile': {
                'customerProfileId': customer_profile_id,
                'paymentProfile': {
                    'paymentProfileId': payment_method.remote_id,
                },
            },
        }

        data = self._execute_transaction(transaction_request, ref_id=str(payment.id)[:20])
        transaction_response = data.get('transactionResponse', {})

        payment.remote_id = transaction_response.get('transId', '')
        if transaction_response.get('responseCode') == RESPONSE_HELD:
            payment.state = 'authorization'
            payment.remote_state = 'held_for_review'
        elif capture:
            payment.state = 'completed'
            payment.remote_state = 'auth_capture'
            payment.completed_at = timezone.now()
        else:
            payment.state = 'authorization'
            payment.remote_state = 'auth_only'

        logger.info(
            "Authorize.Net payment created",
            extra={'gateway': self.gateway_id, 'transaction_id': payment.remote_id}
        )

    def void_payment(self, payment):
        if not payment.remote_id:
            raise PaymentGatewayException(
                message="Only payments with a remote transaction can be voided.",
                error_code='void_failed'
            )

        self._execute_transaction({
            'transactionType': 'voidTransaction',
            'refTransId': payment.remote_id,
        })

        payment.state = 'authorization_voided'
        payment.remote_state = 'voided'
        payment.save()

    def _execute_transaction(self, transaction_request: Dict[str, Any], ref_id: Optional[str] = None) -> Dict[str, Any]:
        """
        Send a createTransactionRequest and check the transaction response.

        Raises:
            DeclineException: If the processor declined the transaction
            PaymentGatewayException: On any other failure
        """
        request = CreateTransactionRequest(
            self.get_authnet_configuration(),
            self.http_session,
            transaction_request,
            ref_id=ref_id
        )

        try:
            data = request.execute()
        except AuthNetException as e:
            self._raise_for_transaction(e.response or {}, fallback=e)

        response_code = data.get('transactionResponse', {}).get('responseCode')
        if response_code not in (RESPONSE_APPROVED, RESPONSE_HELD):
            self._raise_for_transaction(data)

        return data

    def _raise_for_transaction(self, data: Dict[str, Any], fallback: Optional[AuthNetException] = None):
        transaction_response = data.get('transactionResponse') or {}
        errors = transaction_response.get('errors') or [{}]
        error_text = errors[0].get('errorText') or (fallback.message if fallback else 'Transaction failed')

        if transaction_response.get('responseCode') == RESPONSE_DECLINED:
            hard = errors[0].get('errorCode') in HARD_DECLINE_REASON_CODES
            logger.warning(
                "Authorize.Net transaction declined",
                extra={'gateway': self.gateway_id, 'error': error_text, 'hard_decline': hard}
            )
            exception_class = HardDeclineException if hard else DeclineException
            raise exception_class(
                message=f"Transaction declined: {error_text}",
                error_code='transaction_hard_declined' if hard else 'transaction_declined',
                gateway_response=data or None
            ) from fallback

        logger.warning(
            "Authorize.Net transaction failed",
            extra={'gateway': self.gateway_id, 'error': error_text}
        )
        raise PaymentGatewayException(
            message=f"Transaction failed: {error_text}",
            error_code=errors[0].get('errorCode') or (fallback.message_code if fallback else 'transaction_failed'),
            gateway_response=data or None
        ) from fallback
