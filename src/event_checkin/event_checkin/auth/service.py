from __future__ import annotations

import hmac
from typing import Optional

from ..core.exceptions import AuthorizationError


class AdminSecretVerifier:
    """Checks the single shared admin password.

    An unset password rejects everything, so a missing setting never opens
    the admin endpoints.
    """

    def __init__(self, secret: Optional[str]):
        self._secret = secret or ""

    def verify(self, candidate: Optional[str]) -> bool:
        if not self._secret or not candidate:
            return False
        return hmac.compare_digest(str(candidate).encode("utf-8"), self._secret.encode("utf-8"))

    def require(self, candidate: Optional[str]) -> None:
        if not self.verify(candidate):
            raise AuthorizationError("Invalid or missing password")
