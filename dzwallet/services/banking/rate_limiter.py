# dzwallet/services/banking/rate_limiter.py
"""
Cooldown + attempt-cap gate for financial actions

The state is owned by the caller (one RateLimitState per action flow);
this module keeps nothing between calls.
"""
from dataclasses import dataclass
from datetime import datetime, timezone

from dzwallet.core.constants import RATE_LIMIT_COOLDOWN_MS, ErrorKind, message_for
from dzwallet.core.exception import RateLimitExceededError
from dzwallet.core.logging import logger


def _as_utc(moment: datetime) -> datetime:
    # Naive timestamps are read as UTC, like the date validators do
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def _message(kind: ErrorKind, max_attempts: int, cooldown_ms: int) -> str:
    return message_for(kind, max_attempts=max_attempts, seconds=cooldown_ms // 1000)


def evaluate_rate_limit(
    last_action_time: datetime | None,
    max_attempts: int,
    current_attempts: int,
    now: datetime | None = None,
    cooldown_ms: int = RATE_LIMIT_COOLDOWN_MS,
) -> ErrorKind | None:
    """Return the blocking rule, or None when the action may proceed"""
    if last_action_time is not None:
        now = _as_utc(now) if now is not None else datetime.now(timezone.utc)
        elapsed_ms = (now - _as_utc(last_action_time)).total_seconds() * 1000
        if elapsed_ms < cooldown_ms:
            return ErrorKind.RATE_LIMIT_COOLDOWN

    if current_attempts >= max_attempts:
        return ErrorKind.RATE_LIMIT_ATTEMPTS_EXCEEDED

    return None


def check_transaction_rate_limit(
    last_action_time: datetime | None,
    max_attempts: int,
    current_attempts: int,
    now: datetime | None = None,
) -> str | None:
    """
    Check whether a new financial action is allowed.

    Returns the localized rejection message, or None when allowed.
    The cooldown (30 s since the last action) is checked before the
    attempt cap.
    """
    kind = evaluate_rate_limit(last_action_time, max_attempts, current_attempts, now)
    if kind is None:
        return None
    return _message(kind, max_attempts, RATE_LIMIT_COOLDOWN_MS)


@dataclass
class RateLimitState:
    """Per-flow rate-limit record; create one per action type"""

    max_attempts: int
    last_action_time: datetime | None = None
    attempt_count: int = 0
    cooldown_ms: int = RATE_LIMIT_COOLDOWN_MS

    def check(self, now: datetime | None = None) -> str | None:
        kind = evaluate_rate_limit(
            self.last_action_time, self.max_attempts, self.attempt_count, now, self.cooldown_ms
        )
        return None if kind is None else _message(kind, self.max_attempts, self.cooldown_ms)

    def enforce(self, now: datetime | None = None) -> None:
        """Raise RateLimitExceededError when the next action is blocked"""
        kind = evaluate_rate_limit(
            self.last_action_time, self.max_attempts, self.attempt_count, now, self.cooldown_ms
        )
        if kind is not None:
            logger.bind(action="rate_limit", rejected=True).warning(
                "⏳ Rate limit hit ({}): attempts={}/{}",
                kind.value,
                self.attempt_count,
                self.max_attempts,
            )
            raise RateLimitExceededError.from_kind(
                kind, max_attempts=self.max_attempts, seconds=self.cooldown_ms // 1000
            )

    def record_attempt(self, now: datetime | None = None) -> None:
        """Count a submit attempt (successful or not) and start the cooldown"""
        self.attempt_count += 1
        self.last_action_time = now or datetime.now(timezone.utc)

    def reset(self) -> None:
        self.attempt_count = 0
        self.last_action_time = None
