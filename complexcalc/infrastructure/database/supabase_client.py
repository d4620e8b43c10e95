"""Supabase access for the calculator API.

A validated `UserInfo.id` is the key `SessionStore` uses to hand each user
their own `CalculatorSession`. The shared client also backs `HistoryStorage`.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

from supabase import Client, create_client


@dataclass(slots=True)
class UserInfo:
    id: str
    email: str | None


class SupabaseAuthAdapter:
    """Small wrapper to validate Supabase access tokens.

    When SUPABASE_DISABLED=1, this returns a fake user for any token.
    """

    def __init__(self) -> None:
        self.disabled = os.getenv("SUPABASE_DISABLED", "0") == "1"
        self.url = os.getenv("SUPABASE_URL")
        self.key = os.getenv("SUPABASE_ANON_KEY")
        self._client: Client | None = None
        if not self.disabled and self.url and self.key:
            self._client = create_client(self.url, self.key)

    def validate_token(self, token: str) -> UserInfo:
        if not token:
            raise ValueError("Missing access token")
        if self.disabled or not self._client:
            # Deterministic per token so each token maps to one calculator session
            fake_id = f"fake-{abs(hash(token)) % (10**10)}"
            return UserInfo(id=fake_id, email=None)
        try:
            res = self._client.auth.get_user(token)
            user = res.user if res else None
            if not user:
                raise ValueError("Invalid access token")
            return UserInfo(id=user.id, email=user.email)
        except ValueError:
            raise
        except Exception as exc:  # pragma: no cover - network path
            raise ValueError(f"Invalid access token: {exc}") from exc


_CLIENT_SINGLETON: Client | None = None


def get_supabase_client() -> Client | None:
    global _CLIENT_SINGLETON
    disabled = os.getenv("SUPABASE_DISABLED", "0") == "1"
    url = os.getenv("SUPABASE_URL")
    key = os.getenv("SUPABASE_ANON_KEY")
    if disabled or not url or not key:
        return None
    if _CLIENT_SINGLETON is None:
        _CLIENT_SINGLETON = create_client(url, key)
    return _CLIENT_SINGLETON
