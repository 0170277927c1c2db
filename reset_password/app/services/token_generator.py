"""
Reset token generation and verification.

A reset token is split in two halves:
- selector: public, stored as-is and used to find the request
- verifier: secret, shown to the user once; only an HMAC-SHA256 of it is stored

The HMAC also covers the user id and the expiry time, so a row whose owner or
expiry has been tampered with no longer validates.
"""

import base64
import hashlib
import hmac
import json
import secrets
import string
from datetime import UTC, datetime

ALPHABET = string.ascii_letters + string.digits


class TokenGenerator:
    def __init__(self, signing_key: str, selector_length: int = 20, verifier_length: int = 20):
        self._signing_key = signing_key.encode()
        self.selector_length = selector_length
        self.verifier_length = verifier_length

    def generate_selector(self) -> str:
        return self._random_string(self.selector_length)

    def generate_verifier(self) -> str:
        return self._random_string(self.verifier_length)

    def hash_verifier(self, verifier: str, user_id: str, expires_at: datetime) -> str:
        """
        Args:
            verifier: Raw verifier handed to the user
            user_id: Owner of the request
            expires_at: Naive UTC expiry of the request

        Returns:
            URL-safe base64 HMAC-SHA256 digest (44 characters)
        """
        expires_ts = int(expires_at.replace(tzinfo=UTC).timestamp())
        payload = json.dumps([verifier, str(user_id), expires_ts])
        digest = hmac.new(self._signing_key, payload.encode(), hashlib.sha256).digest()
        return base64.urlsafe_b64encode(digest).decode()

    def verify(
        self, verifier: str, user_id: str, expires_at: datetime, hashed_verifier: str
    ) -> bool:
        """Constant-time check of a raw verifier against its stored hash"""
        expected = self.hash_verifier(verifier, user_id, expires_at)
        return hmac.compare_digest(expected.encode(), hashed_verifier.encode())

    @staticmethod
    def _random_string(length: int) -> str:
        return "".join(secrets.choice(ALPHABET) for _ in range(length))
