"""Client configuration for pycars."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pycars._constants import BASE_URL, USER_AGENT
from pycars.exceptions import CarsConfigError


@dataclasses.dataclass(frozen=True)
class CarsConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        Root URL for all requests (e.g. ``http://localhost:8000/api``).
        A trailing slash is stripped.
    request_timeout : float or None
        Total per-request timeout in seconds.  ``None`` keeps the
        HTTP session's own timeout behaviour.
    user_agent : str
        User-Agent header sent with every request.
    """

    base_url: str = BASE_URL
    request_timeout: float | None = None
    user_agent: str = USER_AGENT

    def __post_init__(self) -> None:
        url = self.base_url.strip()
        if not url.startswith(("http://", "https://")):
            raise CarsConfigError(f"base_url must be an http(s) URL, got {self.base_url!r}")
        if self.request_timeout is not None and self.request_timeout <= 0:
            raise CarsConfigError(f"request_timeout must be positive, got {self.request_timeout}")
        object.__setattr__(self, "base_url", url.rstrip("/"))

    @classmethod
    def from_env(cls, **overrides: Any) -> CarsConfig:
        """Create configuration from environment variables.

        Reads ``CARS_BASE_URL``, ``CARS_REQUEST_TIMEOUT`` and
        ``CARS_USER_AGENT``.  Explicit keyword arguments override
        environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        base_url = env.get("CARS_BASE_URL")
        if base_url is not None:
            config_kwargs["base_url"] = base_url

        timeout_env = env.get("CARS_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            try:
                config_kwargs["request_timeout"] = float(timeout_env)
            except ValueError as exc:
                raise CarsConfigError(f"CARS_REQUEST_TIMEOUT is not a number: {timeout_env!r}") from exc

        user_agent = env.get("CARS_USER_AGENT")
        if user_agent is not None:
            config_kwargs["user_agent"] = user_agent

        config_kwargs.update(overrides)
        return cls(**config_kwargs)
