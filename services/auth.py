# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""API key checks for the JSON API and the browser credential session."""

from __future__ import annotations

import hmac
import logging
from collections.abc import Callable, MutableMapping
from functools import wraps
from typing import Any

from flask import Response, request

logger = logging.getLogger(__name__)

SESSION_KEY = "portline_api_key"


def keys_match(candidate: str | None, expected: str) -> bool:
    if not candidate:
        return False
    return hmac.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))


def require_api_key(expected: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Guard a view with ``Authorization: Bearer <key>``."""

    def decorator(view: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(view)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            header = request.headers.get("Authorization", "")
            if not header:
                return Response("Missing API key", status=401)
            scheme, _, token = header.partition(" ")
            if scheme != "Bearer" or not keys_match(token, expected):
                logger.warning("rejected API request to %s: invalid key", request.path)
                return Response("Invalid API key", status=401)
            return view(*args, **kwargs)

        return wrapper

    return decorator


class CredentialSession:
    """Holds the browser's API key between requests.

    ``init`` is the startup step: a key passed in the URL wins when it is
    valid, otherwise a previously stored key is reused. A stored key that no
    longer matches is cleared, which sends the user back to the login prompt.
    """

    def __init__(self, expected: str, store: MutableMapping[str, Any]):
        self.expected = expected
        self.store = store

    def init(self, url_key: str | None = None) -> bool:
        if url_key:
            if self.login(url_key):
                return True
            logger.info("API key from URL rejected")
        stored = self.current()
        if stored is None:
            return False
        if keys_match(stored, self.expected):
            return True
        self.clear()
        return False

    def login(self, key: str) -> bool:
        key = key.strip()
        if not keys_match(key, self.expected):
            return False
        self.store[SESSION_KEY] = key
        return True

    def current(self) -> str | None:
        return self.store.get(SESSION_KEY)

    def clear(self) -> None:
        self.store.pop(SESSION_KEY, None)
