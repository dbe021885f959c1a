"""
Spaced repetition scheduler using a fixed doubling ladder.

A card's step index points into LADDER. The duration at that index is how
long after its last review the card becomes due again.

    step:  0  1  2  3  4   5   6   7
    days:  0  1  2  4  8  16  32  64

Passing a card moves it one rung up (saturating at the top). Failing a card
always puts it on rung 1, not rung 0, so a failed card is seen again the
next day rather than immediately.
"""

from datetime import datetime, timedelta, timezone

# Review intervals in days
LADDER = [0, 1, 2, 4, 8, 16, 32, 64]
INTERVALS = tuple(timedelta(days=d) for d in LADDER)

FIRST_STEP = 0
LAST_STEP = len(LADDER) - 1

# Step a card lands on after a failed recall
FAIL_STEP = 1

PASS_REPLIES = ('', 'y')


def is_due(step_index, updated_at, now=None):
    """
    True iff `now` is at or past `updated_at` plus the ladder duration for
    `step_index`. Naive datetimes are taken to be UTC.
    """
    if not FIRST_STEP <= step_index <= LAST_STEP:
        raise ValueError(f"step index {step_index} is outside the ladder (0-{LAST_STEP})")

    now = _as_utc(now if now is not None else datetime.now(timezone.utc))
    return now >= _as_utc(updated_at) + INTERVALS[step_index]


def next_step(step_index, passed):
    """Step index after a review: up one rung on a pass, rung 1 on a fail."""
    if passed:
        return min(step_index + 1, LAST_STEP)
    return FAIL_STEP


def clamp_step(step_index):
    return max(FIRST_STEP, min(step_index, LAST_STEP))


def due_cards(cards, now=None):
    """Cards (dicts from the DB) that are due, in the order given."""
    now = now if now is not None else datetime.now(timezone.utc)
    return [c for c in cards if is_due(c['step_index'], c['updated_at'], now)]


def is_pass(reply):
    """Judging rule: an empty reply or 'y' / 'Y' counts as a pass."""
    return reply.lower() in PASS_REPLIES


def _as_utc(moment):
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment
