"""
Request classes for the Authorize.Net JSON API.

Every request is a single POST of one JSON document to the configured
endpoint. Replies are JSON prefixed with a UTF-8 byte order mark.
"""

import json
import logging
from typing import Any, Dict, Optional

import requests
from django.conf import settings

from .configuration import Configuration
from .exceptions import AuthNetException
from .types import Subscription

logger = logging.getLogger(__name__)


class ApiRequest:
    """
    Base class for Authorize.Net API requests.

    Subclasses set ``root_element`` and implement ``attach_data``.
    """

    root_element = None

    def __init__(self, configuration: Configuration, session: Optional[requests.Session] = None):
        self.configuration = configuration
        self.session = session

    def attach_data(self, body: Dict[str, Any]):
        raise NotImplementedError

    def to_dict(self) -> Dict[str, Any]:
        body = {'merchantAuthentication': self.configuration.merchant_authentication()}
        self.attach_data(body)
        return {self.root_element: body}

    def execute(self) -> Dict[str, Any]:
        """
        Send the request and return the decoded reply.

        Without an injected session a short-lived one is opened and closed
        around the call.

        Raises:
            AuthNetException: On transport failure, an undecodable reply
                or an error result code
        """
        try:
            if self.session is not None:
                http_response = self._post(self.session)
            else:
                with requests.Session() as session:
                    http_response = self._post(session)
        except requests.RequestException as e:
            logger.warning(
                "Authorize.Net request failed",
                extra={'request': self.root_element, 'error': str(e)}
            )
            raise AuthNetException(
                message=f"{self.root_element} failed: {str(e)}",
                message_code='http_error'
            ) from e

        try:
            data = json.loads(http_response.content.decode('utf-8-sig'))
        except ValueError as e:
            raise AuthNetException(
                message=f"Invalid response to {self.root_element}: {str(e)}",
                message_code='invalid_response'
            ) from e

        if not isinstance(data, dict):
            raise AuthNetException(
                message=f"Invalid response to {self.root_element}: expected a JSON object",
                message_code='invalid_response'
            )

        messages = data.get('messages') or {}
        if messages.get('resultCode') == 'Error':
            message = (messages.get('message') or [{}])[0]
            raise AuthNetException(
                message=message.get('text', 'Unknown Authorize.Net error'),
                message_code=message.get('code'),
                response=data
            )

        return data

    def _post(self, session) -> requests.Response:
        http_response = session.post(
            self.configuration.endpoint,
            data=json.dumps(self.to_dict()),
            headers={'Content-Type': 'application/json'},
            timeout=getattr(settings, 'AUTHNET_HTTP_TIMEOUT', 30),
        )
        http_response.raise_for_status()
        return http_response


class CreateTransactionRequest(ApiRequest):
    root_element = 'createTransactionRequest'

    def __init__(self, configuration, session, transaction_request: Dict[str, Any], ref_id: Optional[str] = None):
        super().__init__(configuration, session)
        self.transaction_request = transaction_request
        self.ref_id = ref_id

    def attach_data(self, body):
        if self.ref_id:
            body['refId'] = self.ref_id[:20]
        body['transactionRequest'] = self.transaction_request


class ARBCreateSubscriptionRequest(ApiRequest):
    root_element = 'ARBCreateSubscriptionRequest'

    def __init__(self, configuration, session, subscription: Subscription):
        super().__init__(configuration, session)
        self.subscription = subscription

    def attach_data(self, body):
        body['subscription'] = self.subscription.to_dict()
