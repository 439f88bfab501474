"""Identity provider client.

The hosting platform owns login and redirects; this module only asks it who
the current user is.
"""

import logging
import os
from pathlib import Path

import requests
from dotenv import load_dotenv

from errors import AuthUnresolved
from models import Identity

load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env")

logger = logging.getLogger(__name__)

IDENTITY_URL = os.getenv("IDENTITY_URL", "").strip()
IDENTITY_TOKEN = os.getenv("IDENTITY_TOKEN", "").strip()
IDENTITY_TIMEOUT_SECONDS = float(os.getenv("IDENTITY_TIMEOUT_SECONDS", "10"))


class IdentityClient:
    def __init__(
        self,
        url: str = IDENTITY_URL,
        token: str = IDENTITY_TOKEN,
        timeout: float = IDENTITY_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ):
        self.url = url
        self.token = token
        self.timeout = timeout
        self._session = session or requests.Session()

    def resolve_identity(self) -> Identity:
        """Return the current identity. Raises AuthUnresolved when there is none."""
        if not self.url or not self.token:
            raise AuthUnresolved("Identity provider is not configured.")

        try:
            response = self._session.get(
                self.url,
                headers={"Authorization": f"Bearer {self.token}", "Accept": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            body = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise AuthUnresolved(f"Identity request failed: {exc}") from exc

        return parse_identity(body)


def parse_identity(body: object) -> Identity:
    if not isinstance(body, dict):
        raise AuthUnresolved("Identity payload is not an object.")

    user_id = str(body.get("id") or "").strip()
    email = str(body.get("email") or "").strip()
    if not user_id or not email:
        raise AuthUnresolved("Identity payload is missing id or email.")

    display_name = body.get("displayName")
    identity: Identity = {"id": user_id, "email": email}
    if isinstance(display_name, str) and display_name.strip():
        identity["displayName"] = display_name.strip()
    return identity


def greeting_name(identity: Identity) -> str:
    return identity.get("displayName") or identity["email"]


def avatar_initial(identity: Identity) -> str:
    return greeting_name(identity)[:1].upper()
