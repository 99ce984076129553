import json
from pathlib import Path

import pytest

import config
from handlers.data_processor import DataProcessor
from models.schemas import Company, User

FIXTURE_DATA = Path(__file__).resolve().parent.parent / "data"


@pytest.fixture
def fixture_data(monkeypatch):
    monkeypatch.setattr(config, "DATA_FOLDER", str(FIXTURE_DATA))
    return FIXTURE_DATA


@pytest.fixture
def tmp_data(monkeypatch, tmp_path):
    """Empty data folder; write inputs with the returned helper."""
    monkeypatch.setattr(config, "DATA_FOLDER", str(tmp_path))

    def _write(name, payload):
        path = tmp_path / name
        if isinstance(payload, str):
            path.write_text(payload, encoding="utf-8")
        else:
            path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def outcome(fixture_data):
    return DataProcessor().process("companies.json", "users.json")


@pytest.fixture
def make_user():
    counter = {"id": 0}

    def _make(**overrides):
        counter["id"] += 1
        data = {
            "id": counter["id"],
            "first_name": "John",
            "last_name": "Doe",
            "email": "johndoe@test.com",
            "company_id": 1,
            "email_status": True,
            "active_status": True,
            "tokens": 75,
        }
        data.update(overrides)
        return User(**data)

    return _make


@pytest.fixture
def make_company():
    def _make(**overrides):
        data = {"id": 1, "name": "Test Company", "top_up": 100, "email_status": True}
        data.update(overrides)
        return Company(**data)

    return _make
