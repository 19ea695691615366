# src/domains/integrations/poweroffice_go/onboarding/session_registry.py
import logging
import threading
import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Optional
from uuid import UUID

from src.shared.exceptions import UnknownSessionError

from .models import OnboardingSession

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OnboardingSessionRegistry:
    """
    In-memory registry of in-flight onboarding sessions.

    Each session is keyed by a random correlation token and can be consumed
    exactly once. All access goes through a single lock, so concurrent
    callbacks racing on the same token see exactly one successful consume.

    Sessions live for the lifetime of the process unless ``ttl_seconds`` is
    given, in which case expired sessions are evicted lazily on create and
    consume.
    """

    def __init__(
        self,
        ttl_seconds: Optional[int] = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        if ttl_seconds is not None and ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")

        self._sessions: Dict[UUID, OnboardingSession] = {}
        self._lock = threading.Lock()
        self._ttl = timedelta(seconds=ttl_seconds) if ttl_seconds is not None else None
        self._clock = clock

    def create(self, subscription_key: str, return_redirect_url: str) -> UUID:
        """Store a new session and return its correlation token."""
        session = OnboardingSession(
            subscription_key=subscription_key,
            return_redirect_url=return_redirect_url,
            created_at=self._clock(),
        )

        with self._lock:
            self._evict_expired()

            token = uuid.uuid4()
            while token in self._sessions:
                token = uuid.uuid4()

            self._sessions[token] = session

        logger.info(f"Created onboarding session {token}")
        return token

    def consume(self, token: UUID) -> OnboardingSession:
        """
        Remove and return the session for the given correlation token.

        Raises:
            UnknownSessionError: If the token was never issued, was already
                consumed or has expired
        """
        with self._lock:
            self._evict_expired()
            session = self._sessions.pop(token, None)

        if session is None:
            logger.warning(f"Attempted to complete onboarding with unknown token: {token}")
            raise UnknownSessionError(
                f"Attempted to complete onboarding with unknown token: {token}"
            )

        logger.info(f"Consumed onboarding session {token}")
        return session

    @property
    def pending_count(self) -> int:
        """Number of sessions waiting for their callback."""
        with self._lock:
            return len(self._sessions)

    def _evict_expired(self) -> None:
        # Caller must hold the lock
        if self._ttl is None:
            return

        cutoff = self._clock() - self._ttl
        expired = [
            token
            for token, session in self._sessions.items()
            if session.created_at <= cutoff
        ]
        for token in expired:
            del self._sessions[token]

        if expired:
            logger.info(f"Evicted {len(expired)} expired onboarding sessions")
