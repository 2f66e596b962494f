"""Signed session tokens: ``base64url(JSON) "." base64url(HMAC-SHA256)``.

The payload is signed, not encrypted. Session contents are readable by the
cookie holder but cannot be forged or altered without the key.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
from typing import Generic, TypeVar

from itsdangerous import BadData, Signer
from itsdangerous.encoding import base64_decode, base64_encode, want_bytes
from pydantic import BaseModel, ValidationError

from ..errors import InvalidInput

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

SEPARATOR = "."
INVALID_SESSION = "Invalid session"


class TokenCodec(Generic[ModelT]):
    """Encode/decode session values of one pydantic model type.

    The HMAC covers the base64url payload segment exactly as transmitted,
    so nothing is re-encoded before verification.
    """

    def __init__(self, secret_key: str | bytes, model: type[ModelT]) -> None:
        if not secret_key:
            raise ValueError("A session signing key is required")
        self.model = model
        self._signer = Signer(
            secret_key,
            sep=SEPARATOR,
            key_derivation="none",
            digest_method=hashlib.sha256,
        )

    def encode(self, value: ModelT) -> str:
        payload = base64_encode(value.model_dump_json())
        return self._signer.sign(payload).decode("ascii")

    def decode(self, token: str) -> ModelT:
        payload, sep, signature = token.partition(SEPARATOR)
        if not sep or not payload or not signature or SEPARATOR in signature:
            raise InvalidInput(INVALID_SESSION)

        # Compare the encoded signature strings so that alternate base64
        # spellings of the same digest are rejected too.
        expected = self._signer.get_signature(payload)
        if not hmac.compare_digest(expected, want_bytes(signature)):
            raise InvalidInput(INVALID_SESSION)

        try:
            raw = base64_decode(payload)
            return self.model.model_validate_json(raw)
        except (BadData, ValidationError) as e:
            logger.warning("Signed session payload did not deserialize: %s", e)
            raise InvalidInput(INVALID_SESSION) from e
