"""
Invite Token Protection

Turns an invitation payload into an opaque, tamper-evident string and back.
The string grants the right to create an account, so it is encrypted with
Fernet (AES-CBC + HMAC-SHA256) under a key derived from the invite secret.
"""

import base64
import binascii
import logging

from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF
from pydantic import BaseModel, ValidationError

from src.domain.entities import EmployeeRole

logger = logging.getLogger(__name__)

_KDF_INFO = b"employee-invite-token"


class InvitePayload(BaseModel):
    """Decrypted contents of an invite token"""

    id: int
    email: str
    company_id: int
    role: EmployeeRole


class InviteDecodeError(ValueError):
    """Raised when an invite token cannot be trusted or parsed"""


def _fernet(secret_key: str) -> Fernet:
    if not secret_key or not secret_key.strip():
        raise ValueError("Invite secret key is required")

    key = HKDF(
        algorithm=hashes.SHA256(),
        length=32,
        salt=None,
        info=_KDF_INFO,
    ).derive(secret_key.encode("utf-8"))
    return Fernet(base64.urlsafe_b64encode(key))


def _is_canonical(token: bytes) -> bool:
    """Fernet decoding ignores trailing data after padding; only accept exact encodings"""
    try:
        return base64.urlsafe_b64encode(base64.urlsafe_b64decode(token)) == token
    except (binascii.Error, ValueError):
        return False


def protect(payload: InvitePayload, secret_key: str) -> str:
    """Serialize and encrypt an invite payload"""
    return _fernet(secret_key).encrypt(payload.model_dump_json().encode()).decode()


def unprotect(token: str, secret_key: str) -> InvitePayload:
    """
    Decrypt and parse an invite token.

    Raises:
        InviteDecodeError: If the token is malformed, was issued under another
            key, was tampered with, or does not hold an invite payload
    """
    fernet = _fernet(secret_key)
    raw = token.encode("utf-8")

    if not _is_canonical(raw):
        logger.warning("Invite token is not canonical base64")
        raise InviteDecodeError("Invite token is invalid")

    try:
        plaintext = fernet.decrypt(raw)
    except (InvalidToken, TypeError, ValueError) as exc:
        logger.warning("Invite token failed authentication")
        raise InviteDecodeError("Invite token is invalid") from exc

    try:
        return InvitePayload.model_validate_json(plaintext)
    except ValidationError as exc:
        logger.warning("Invite token payload has an unexpected shape")
        raise InviteDecodeError("Invite payload is invalid") from exc
