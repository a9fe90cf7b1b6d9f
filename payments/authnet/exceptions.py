from typing import Optional, Dict


class AuthNetException(Exception):
    """
    Raised when an Authorize.Net API call fails.

    Covers transport errors, non-2xx responses, undecodable bodies and
    responses whose ``messages.resultCode`` is ``Error``.
    """
    def __init__(self, message: str, message_code: Optional[str] = None, response: Optional[Dict] = None):
        self.message = message
        self.message_code = message_code
        self.response = response
        super().__init__(self.message)
