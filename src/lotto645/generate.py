from __future__ import annotations
import logging
import random
from typing import List

from .rules import LottoRules, Ticket

logger = logging.getLogger(__name__)

def ticket_count(amount: int, r: LottoRules) -> int:
    return amount // r.ticket_price

def _random_ticket(r: LottoRules, rng: random.Random) -> Ticket:
    picks = rng.sample(range(r.min_number, r.max_number + 1), k=r.number_count)
    picks.sort()
    return tuple(picks)

def generate_tickets(
    count: int,
    rules: LottoRules,
    seed: int | None = None,
) -> List[Ticket]:
    """Draw ``count`` independent tickets. Tickets may repeat across the batch."""
    rng = random.Random(seed)  # seed=None reseeds from OS entropy
    tickets = [_random_ticket(rules, rng) for _ in range(count)]
    logger.debug("Generated %d tickets (seed=%s)", len(tickets), seed)
    return tickets
