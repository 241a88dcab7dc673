"""Shared fixtures: canned TEDB payloads and a recording stub transport."""
from __future__ import annotations

import json
from datetime import date

import pytest

TWO_COUNTRY_PAYLOAD = {
    "result": [
        {
            "memberState": {"name": "Spain", "defaultCountryCode": "ES", "id": 10},
            "historized": False,
            "type": "REDUCED",
            "rates": [
                {
                    "rate": {"type": "REDUCED_RATE", "value": 10.0},
                    "situationOn": "2024/03/01",
                    "cnCodes": [{"code": "3304 99 00", "description": "Other beauty preparations"}],
                    "category": "foodstuffs",
                    "comment": "Applies to preparations for human consumption.",
                },
                {
                    "rate": {"type": "SUPER_REDUCED_RATE", "value": 4.0},
                    "situationOn": "2024/03/01",
                    "cnCodes": [{"code": "0402 29 11"}],
                    "category": "foodstuffs",
                    "comment": "",
                },
            ],
        },
        {
            "memberState": {"name": "France", "defaultCountryCode": "FR"},
            "historized": True,
            "type": "STANDARD",
            "rates": [
                {
                    "rate": {"type": "STANDARD_RATE", "value": 20.0},
                    "situationOn": "2024/03/01",
                    "cnCodes": [],
                    "category": None,
                    "comment": None,
                }
            ],
        },
    ],
    "errors": None,
}


class StubTransport:
    """Records calls and replays canned bodies instead of hitting the network."""

    def __init__(self, body: bytes = b"", code_lists: dict | None = None, error: Exception | None = None) -> None:
        self.body = body
        self.code_lists = code_lists or {}
        self.error = error
        self.posts: list[tuple[str, dict]] = []
        self.gets: list[str] = []

    def post_json(self, path: str, payload: dict) -> bytes:
        self.posts.append((path, payload))
        if self.error is not None:
            raise self.error
        return self.body

    def get_json(self, path: str) -> bytes:
        self.gets.append(path)
        if self.error is not None:
            raise self.error
        return self.code_lists[path]


@pytest.fixture
def payload_bytes() -> bytes:
    return json.dumps(TWO_COUNTRY_PAYLOAD).encode("utf-8")


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 3, 1)


@pytest.fixture
def make_transport():
    return StubTransport


@pytest.fixture
def two_country_payload() -> dict:
    return TWO_COUNTRY_PAYLOAD
