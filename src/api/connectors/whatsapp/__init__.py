"""Conector WhatsApp - adapter de borda para Meta Graph API.

Responsabilidades:
- Webhook (receive, verify, signature)
"""

from .signature import SignatureResult, verify_meta_signature

__all__ = [
    "SignatureResult",
    "verify_meta_signature",
]
