"""Digest functions and the hashing stage.

The digest is a visual fingerprint, not a security mechanism: MD5 is the
default and is pinned so identicons stay stable across releases. Alternative
16-byte digests are exposed through ``HASH_FN_REGISTRY``.
"""

import hashlib
from typing import Dict

from pyrsistent import pvector

from identicon.config import DEFAULT_HASH, DIGEST_SIZE
from identicon.image import Image
from identicon.types import HashFn


def md5_digest(data: bytes) -> bytes:
    """MD5, the algorithm every existing identicon was drawn with."""
    return hashlib.md5(data).digest()


def blake2s_digest(data: bytes) -> bytes:
    return hashlib.blake2s(data, digest_size=DIGEST_SIZE).digest()


def shake128_digest(data: bytes) -> bytes:
    return hashlib.shake_128(data).digest(DIGEST_SIZE)


HASH_FN_REGISTRY: Dict[str, HashFn] = {
    "md5": md5_digest,
    "blake2s": blake2s_digest,
    "shake128": shake128_digest,
}
"""Registry of digest names to callables returning exactly 16 bytes.

Callers may pass any conforming callable to :func:`hash_string` directly.
"""


def get_hash_fn(name: str = DEFAULT_HASH) -> HashFn:
    """Look up a registered digest function by name."""
    try:
        return HASH_FN_REGISTRY[name]
    except KeyError:
        raise ValueError(
            f"Unknown hash function {name!r}; expected one of {sorted(HASH_FN_REGISTRY)}"
        ) from None


def hash_string(input: str, hash_fn: HashFn = md5_digest) -> Image:
    """Hash ``input`` into a fresh ``Image`` whose ``hex`` is the digest.

    Args:
        input (str): Any string, including the empty string. Encoded as UTF-8.
        hash_fn (HashFn): Digest primitive; must return ``DIGEST_SIZE`` bytes.

    Returns:
        Image: New record with only ``hex`` populated.

    Raises:
        ValueError: If ``hash_fn`` returns a digest of the wrong length.
    """
    digest = hash_fn(input.encode("utf-8"))
    if len(digest) != DIGEST_SIZE:
        raise ValueError(
            f"Hash function returned {len(digest)} bytes, expected {DIGEST_SIZE}"
        )
    return Image(hex=pvector(digest))
