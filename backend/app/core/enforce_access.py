"""Operator Access Enforcement - the privileged-caller capability check.

Invariants:
    - PURE: no IO, compares the presented credential against the configured one
    - A missing or empty presented key never matches, even when no key is configured
    - Comparison is constant-time (hmac.compare_digest)

Design Decisions:
    - Kept out of the Registry: validation logic never knows who is calling; the API
      layer wraps mutating entry points with this check
"""

import hmac

from app.core.errors import OperatorRequiredError, ErrorContext


def is_operator(presented_key: str | None, operator_key: str) -> bool:
    """True when the presented key matches the configured operator key."""
    if not presented_key or not operator_key:
        return False
    return hmac.compare_digest(
        presented_key.encode("utf-8"), operator_key.encode("utf-8"),
    )


def check_operator(
    presented_key: str | None, operator_key: str, operation: str,
) -> OperatorRequiredError | None:
    """Return OperatorRequiredError when the caller is not the operator."""
    if is_operator(presented_key, operator_key):
        return None
    return OperatorRequiredError(
        ErrorContext(debug_info={"operation": operation}),
    )
