import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import pytest
import requests

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = '', json_data: Any = None,
                 url: str = ''):
        self.status_code = status_code
        self.text = text
        self._json = json_data
        self.url = url

    def json(self):
        if self._json is None:
            raise ValueError("No JSON object could be decoded")
        return self._json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error for url: {self.url}", response=self)


class FakeHTTP:
    """Routes Session.get calls to canned responses by URL substring."""

    def __init__(self):
        self.routes: List[Tuple[str, Any]] = []
        self.calls: List[Dict[str, Any]] = []

    def add(self, url_part: str, response: Any):
        self.routes.append((url_part, response))

    def get(self, url: str, params: Optional[Dict[str, Any]] = None,
            headers: Optional[Dict[str, str]] = None, timeout=None):
        self.calls.append({'url': url, 'params': dict(params or {}), 'timeout': timeout})
        for url_part, response in self.routes:
            if url_part in url:
                if isinstance(response, Exception):
                    raise response
                response.url = url
                return response
        return FakeResponse(404, text='Not Found', url=url)

    def urls(self) -> List[str]:
        return [call['url'] for call in self.calls]


@pytest.fixture
def http(monkeypatch):
    """Replace network access for every requests.Session."""
    fake = FakeHTTP()

    def fake_get(session, url, params=None, headers=None, timeout=None, **kwargs):
        return fake.get(url, params=params, headers=headers, timeout=timeout)

    monkeypatch.setattr(requests.Session, 'get', fake_get)
    return fake
