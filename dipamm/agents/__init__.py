"""
Signing agents
"""

from .signer import BlsSigner, signing_digest, verify_signature

__all__ = [
    "BlsSigner",
    "signing_digest",
    "verify_signature",
]
