import pytest
from fastapi.testclient import TestClient

from config import Settings
from journal.service import EntryExistsError
from main import create_app


class FakeEntryStore:
    """In-memory stand-in for EntryStore with the same unique-date rule."""

    def __init__(self):
        self.rows = []
        self.next_id = 1

    def find_by_date(self, date):
        for row in self.rows:
            if row["date"] == date:
                return row
        return None

    def create(self, date, text, mood):
        if self.find_by_date(date) is not None:
            raise EntryExistsError(date)
        row = {"id": self.next_id, "date": date, "text": text, "mood": mood}
        self.next_id += 1
        self.rows.append(row)
        return row

    def list_all(self):
        return sorted(self.rows, key=lambda r: r["date"], reverse=True)


@pytest.fixture
def settings():
    return Settings(supabase_url="", supabase_key="")


@pytest.fixture
def store():
    return FakeEntryStore()


@pytest.fixture
def client(settings, store):
    return TestClient(create_app(settings, store=store))
