from abc import ABC, abstractmethod
from typing import Optional

from .typedefs import RequestLike, ResponseLike


class AbstractAuthenticator(ABC):
    """Abstract client authenticator."""

    @abstractmethod
    def try_get_auth(
        self, request: RequestLike, response: Optional[ResponseLike] = None
    ) -> str:
        """Return an Authorization header value for request.

        response is the previous reply from the same server, if any.
        An empty string means no header should be sent.
        """
