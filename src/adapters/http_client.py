"""Wrapper de httpx.

- Estandariza timeouts, headers y logging de todas las peticiones.
- `HttpxTransport` implementa `core.interfaces.transport.HttpTransport`; en
  tests se sustituye el transporte de httpx por `httpx.MockTransport`.
"""

from __future__ import annotations

import logging
from typing import Mapping

import httpx

from core.interfaces.transport import RawResponse, TransportFailure

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 20.0
DEFAULT_USER_AGENT = "todo-api-client/0.1"


def build_client(
    *,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    user_agent: str = DEFAULT_USER_AGENT,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` con defaults seguros.

    `transport` permite inyectar `httpx.MockTransport` en tests.
    """

    headers: dict[str, str] = {"User-Agent": user_agent}
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class HttpxTransport:
    """Adaptador de transporte sobre `httpx.Client`.

    El pool de conexiones es de httpx; esta clase no guarda estado por
    petición y puede compartirse entre hilos.
    """

    def __init__(self, client: httpx.Client | None = None) -> None:
        self._client = client or build_client()

    def execute(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes | None = None,
    ) -> RawResponse:
        logger.debug("%s %s", method, url)
        try:
            resp = self._client.request(method, url, headers=dict(headers), content=body)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise TransportFailure(f"{type(exc).__name__}: {exc}") from exc

        logger.debug("%s %s -> HTTP %s", method, url, resp.status_code)
        return RawResponse(status_code=resp.status_code, body=resp.content or None)

    def close(self) -> None:
        self._client.close()
