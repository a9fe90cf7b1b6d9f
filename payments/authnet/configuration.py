from dataclasses import dataclass

SANDBOX_ENDPOINT = 'https://apitest.authorize.net/xml/v1/request.api'
LIVE_ENDPOINT = 'https://api.authorize.net/xml/v1/request.api'


@dataclass(frozen=True)
class Configuration:
    """
    Merchant credentials for the Authorize.Net API.

    Attributes:
        api_login: API Login ID of the merchant account
        transaction_key: Transaction key paired with the login ID
        client_key: Public client key (used by Accept.js on the front end)
        sandbox: Send requests to the sandbox endpoint
    """
    api_login: str
    transaction_key: str
    client_key: str = ''
    sandbox: bool = True

    @property
    def endpoint(self) -> str:
        return SANDBOX_ENDPOINT if self.sandbox else LIVE_ENDPOINT

    def merchant_authentication(self) -> dict:
        return {
            'name': self.api_login,
            'transactionKey': self.transaction_key,
        }
