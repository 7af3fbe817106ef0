import pytest
import requests


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=None):
        self.payload = payload
        self.status_code = status_code
        self.text = text

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")

    def json(self):
        if self.text is not None:
            raise ValueError("Expecting value")
        return self.payload


@pytest.fixture
def fake_get(monkeypatch):
    """
    Replace requests.get; queue responses (or exceptions) in call
    order. Every call's params are recorded on ``fake.requests``.
    """

    class Fake:
        def __init__(self):
            self.responses = []
            self.requests = []

        def queue(self, item):
            self.responses.append(item)

        def __call__(self, url, params=None, headers=None):
            self.requests.append((url, params))
            item = self.responses.pop(0)
            if isinstance(item, Exception):
                raise item
            return item

    fake = Fake()
    monkeypatch.setattr(requests, "get", fake)
    return fake
