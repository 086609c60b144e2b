"""Input validation for public keys and access group names."""

import base58
from cryptography.hazmat.primitives.asymmetric import ec

from ..shared.constants import (
    COMPRESSED_PUBLIC_KEY_SIZE,
    MAX_ACCESS_GROUP_KEY_NAME_CHARACTERS,
    MIN_ACCESS_GROUP_KEY_NAME_CHARACTERS,
    PUBLIC_KEY_PREFIXES,
)
from .error import InvalidParameterError

_CURVE = ec.SECP256K1()
_PREFIX_SIZE = 3


def validate_public_key(public_key: bytes, field_name: str = "public key") -> None:
    """Validate that bytes are a compressed secp256k1 public key.

    Raises:
        InvalidParameterError: If the length is wrong or the point is not on the curve
    """
    if len(public_key) != COMPRESSED_PUBLIC_KEY_SIZE:
        raise InvalidParameterError(
            f"{field_name} must be {COMPRESSED_PUBLIC_KEY_SIZE} bytes, got {len(public_key)}"
        )
    try:
        ec.EllipticCurvePublicKey.from_encoded_point(_CURVE, public_key)
    except ValueError:
        raise InvalidParameterError(f"{field_name} is not a valid secp256k1 point")


def decode_public_key_base58check(value: str, field_name: str = "public key") -> bytes:
    """Decode a Base58Check public key and validate it.

    The payload is a 3-byte network prefix followed by a 33-byte compressed key.

    Raises:
        InvalidParameterError: If decoding or validation fails
    """
    if not value or not value.strip():
        raise InvalidParameterError(f"{field_name} cannot be empty")

    try:
        payload = base58.b58decode_check(value)
    except ValueError as e:
        raise InvalidParameterError(f"Problem decoding {field_name} {value}: {e}")

    prefix, public_key = payload[:_PREFIX_SIZE], payload[_PREFIX_SIZE:]
    if prefix not in PUBLIC_KEY_PREFIXES.values():
        raise InvalidParameterError(f"{field_name} {value} has an unknown network prefix")

    validate_public_key(public_key, field_name)
    return public_key


def encode_public_key_base58check(public_key: bytes, network: str = "mainnet") -> str:
    """Encode a compressed public key as Base58Check with the network prefix.

    Raises:
        InvalidParameterError: If the network is unknown
    """
    try:
        prefix = PUBLIC_KEY_PREFIXES[network]
    except KeyError:
        raise InvalidParameterError(f"Unknown network {network!r}")
    return base58.b58encode_check(prefix + public_key).decode("ascii")


def validate_access_group_key_name(access_group_key_name: str) -> bytes:
    """Validate an access group key name and return its bytes.

    Names are 1-32 bytes. The base group name (all zero bytes once padded to
    32 bytes) is reserved, since every user belongs to that group.

    Raises:
        InvalidParameterError: If the name is invalid
    """
    name_bytes = access_group_key_name.encode("utf-8")
    if not (
        MIN_ACCESS_GROUP_KEY_NAME_CHARACTERS
        <= len(name_bytes)
        <= MAX_ACCESS_GROUP_KEY_NAME_CHARACTERS
    ):
        raise InvalidParameterError(
            f"Access group key name must be {MIN_ACCESS_GROUP_KEY_NAME_CHARACTERS}-"
            f"{MAX_ACCESS_GROUP_KEY_NAME_CHARACTERS} bytes, got {len(name_bytes)}"
        )
    if not any(name_bytes):
        raise InvalidParameterError(
            f"Access group key name {access_group_key_name!r} cannot be the base key (all zeros)"
        )
    return name_bytes


def validate_access_group_public_key_and_name(
    public_key_base58check: str,
    access_group_key_name: str,
) -> tuple[bytes, bytes]:
    """Validate an access group owner key and group name.

    Returns:
        (public key bytes, access group key name bytes)

    Raises:
        InvalidParameterError: If either value is invalid
    """
    public_key = decode_public_key_base58check(
        public_key_base58check, "access group owner public key"
    )
    name_bytes = validate_access_group_key_name(access_group_key_name)
    return public_key, name_bytes
