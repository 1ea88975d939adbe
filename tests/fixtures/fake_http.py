"""
Sessão HTTP falsa para testes da passada de URLs.

Imita o subconjunto de `requests.Session` usado pelo resolver:
`get(url, timeout=...)` devolvendo uma resposta usável como context
manager, com `raise_for_status()` e `content`.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple, Union

import requests


class FakeResponse:
    def __init__(self, content: Union[bytes, str] = b"", status_code: int = 200) -> None:
        if isinstance(content, str):
            content = content.encode("utf-8")
        self.content = content
        self.status_code = status_code
        self.closed = False

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def __enter__(self) -> "FakeResponse":
        return self

    def __exit__(self, *exc_info) -> None:
        self.closed = True


class FakeSession:
    """Rotas fixas por URL; URL desconhecida simula falha de conexão."""

    def __init__(self, routes: Optional[Dict[str, Union[FakeResponse, Exception]]] = None) -> None:
        self.routes = dict(routes or {})
        self.calls: List[Tuple[str, Optional[float]]] = []

    def get(self, url: str, timeout: Optional[float] = None) -> FakeResponse:
        self.calls.append((url, timeout))
        route = self.routes.get(url)
        if route is None:
            raise requests.ConnectionError(f"no route to {url}")
        if isinstance(route, Exception):
            raise route
        return route

    @property
    def requested_urls(self) -> List[str]:
        return [url for url, _ in self.calls]
