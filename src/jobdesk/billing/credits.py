"""Credit consumption — the only stateful decision point in the service.

The balance check and decrement happen atomically inside the
``consume_credits`` stored procedure; it returns the new balance or fails
with a message containing ``INSUFFICIENT_CREDITS``.  This module calls it
and translates the outcome into our error hierarchy.
"""

from __future__ import annotations

import logging
from typing import Any

from jobdesk.core.errors import BackendError, CreditError, InsufficientCreditsError
from jobdesk.db.client import SupabaseClient

logger = logging.getLogger(__name__)

CONSUME_CREDITS_RPC = "consume_credits"
INSUFFICIENT_MARKER = "INSUFFICIENT_CREDITS"
CREDITS_PER_GENERATION = 1


class CreditReason:
    RESUME_GENERATION = "resume_generation"
    COVER_LETTER_GENERATION = "cover_letter_generation"
    TAILOR_RESUME = "tailor_resume"


async def consume_credits(
    client: SupabaseClient,
    user_id: str,
    *,
    reason: str,
    amount: int = CREDITS_PER_GENERATION,
    metadata: dict[str, Any] | None = None,
) -> int:
    """Atomically decrement *user_id*'s balance and return what remains.

    Raises ``InsufficientCreditsError`` when the balance is too low and
    ``CreditError`` for any other procedure failure.
    """
    if amount <= 0:
        raise ValueError(f"Credit amount must be positive, got {amount}")

    try:
        result = await client.rpc(
            CONSUME_CREDITS_RPC,
            {
                "p_user_id": user_id,
                "p_amount": amount,
                "p_reason": reason,
                "p_metadata": metadata or {},
            },
        )
    except BackendError as exc:
        if INSUFFICIENT_MARKER in exc.message:
            logger.info("Insufficient credits (user=%s, reason=%s)", user_id, reason)
            raise InsufficientCreditsError() from exc
        raise CreditError(f"Credit error: {exc.message}") from exc

    try:
        balance = int(result)
    except (TypeError, ValueError) as exc:
        raise CreditError(f"Credit error: unexpected balance {result!r}") from exc

    logger.info("Consumed %d credit(s) (user=%s, reason=%s, remaining=%d)", amount, user_id, reason, balance)
    return balance
