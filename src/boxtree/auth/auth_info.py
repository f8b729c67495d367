"""Authentication information for boxtree (bearer tokens only)."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from boxtree.errors import AuthError

_KINDS: tuple[str, ...] = ("token", "token_file")


@dataclass(slots=True, frozen=True)
class AuthInfo:
    """
    Authentication information.

    Supported kinds:
        kind = "token"
            data must include:
                - access_token
        kind = "token_file"
            data must include:
                - token_file (JSON object with an "access_token" key)

    Obtaining and refreshing tokens is left to the caller.
    """

    kind: str
    data: dict[str, Any]

    def __post_init__(self) -> None:
        if self.kind not in _KINDS:
            raise ValueError(f"AuthInfo.kind must be one of {_KINDS}")

        if not isinstance(self.data, dict):
            raise TypeError("AuthInfo.data must be a dict")

        key = "access_token" if self.kind == "token" else "token_file"
        value = self.data.get(key)
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"AuthInfo.data['{key}'] must be a non-empty string")

    @classmethod
    def from_token(cls, access_token: str) -> AuthInfo:
        return cls(kind="token", data={"access_token": access_token})

    @property
    def access_token(self) -> str:
        """
        The bearer token to send with every request.

        Raises:
            AuthError: if the token file cannot be read or has no token.
        """
        if self.kind == "token":
            return str(self.data["access_token"])

        token_file = str(self.data["token_file"])
        try:
            with open(token_file, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, ValueError) as exc:
            raise AuthError(
                "Failed to load token_file",
                details={"token_file": token_file},
                cause=exc,
            ) from exc

        token = payload.get("access_token") if isinstance(payload, dict) else None
        if not isinstance(token, str) or not token.strip():
            raise AuthError(
                "token_file has no access_token",
                details={"token_file": token_file},
            )
        return token
