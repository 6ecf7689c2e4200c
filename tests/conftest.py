import json

import pytest

import breed_api


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=None):
        self.status_code = status_code
        self._payload = payload
        self._text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._text is not None:
            return json.loads(self._text)
        return self._payload


RAW_BREEDS = [
    {
        "_id": "b1",
        "BreedName": "Gir",
        "Location": ["Gujarat"],
        "MainUses": "Milk",
        "PhysicalDesc": "Domed forehead, long ears",
        "Species": "Bos indicus",
        "BreedingTrait": "Heat tolerant",
    },
    {
        "_id": "b2",
        "BreedName": "Sahiwal",
        "Location": ["Punjab"],
        "MainUses": "Milk",
        "PhysicalDesc": "Reddish brown",
        "Species": "Bos indicus",
        "BreedingTrait": "Tick resistant",
    },
]


@pytest.fixture
def fake_get(monkeypatch):
    """Replace requests.get; set .response (or .error) and inspect .calls."""

    class Recorder:
        def __init__(self):
            self.calls = []
            self.response = FakeResponse({"body": RAW_BREEDS})
            self.error = None

        def __call__(self, url, headers=None, timeout=None):
            self.calls.append({"url": url, "headers": headers or {}, "timeout": timeout})
            if self.error is not None:
                raise self.error
            return self.response

    recorder = Recorder()
    monkeypatch.setattr(breed_api.requests, "get", recorder)
    return recorder
