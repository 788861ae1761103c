# =============================================================================
# core/credentials.py  —  Per-call API key resolution
# =============================================================================
#
# Authentication priority (first match wins):
#   1. Key sent by the connecting client in its Authorization header
#      (remote HTTP transport: every user brings their own key)
#   2. INTERZOID_API_KEY, read once at startup (local stdio transport)
#   3. No key at all: the API answers 402 and the x402 payment flow starts
#
# The result is a CredentialContext that lives for one call only.
# =============================================================================

from typing import Optional

from core.models import CredentialContext, CredentialSource

_BEARER_PREFIXES = ("Bearer ", "bearer ")


def credential_from_authorization(header_value: Optional[str]) -> str:
    """Pull the API key out of an Authorization header value.

    "Bearer <key>" or "bearer <key>" yields <key>; anything else is taken
    as the key itself.
    """
    if not header_value:
        return ""
    for prefix in _BEARER_PREFIXES:
        if len(header_value) > len(prefix) and header_value.startswith(prefix):
            return header_value[len(prefix):]
    return header_value


def resolve_credential(incoming: Optional[str], process_wide: Optional[str]) -> CredentialContext:
    if incoming:
        return CredentialContext(resolved=incoming, source=CredentialSource.REQUEST)
    if process_wide:
        return CredentialContext(resolved=process_wide, source=CredentialSource.PROCESS)
    return CredentialContext(resolved="", source=CredentialSource.NONE)
