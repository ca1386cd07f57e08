from typing import List, Optional

from postgrest.exceptions import APIError

TABLE_NAME = "entries"

# Postgres unique_violation
UNIQUE_VIOLATION = "23505"


class EntryExistsError(Exception):
    pass


class EntryValidationError(ValueError):
    pass


class StoreUnavailableError(Exception):
    pass


class EntryStore:
    """Journal entries in a Supabase table, one row per date."""

    def __init__(self, client, table: str = TABLE_NAME):
        self.client = client
        self.table = table

    def find_by_date(self, date: str) -> Optional[dict]:
        res = (
            self.client
            .table(self.table)
            .select("*")
            .eq("date", date)
            .limit(1)
            .execute()
        )
        return res.data[0] if res.data else None

    def create(self, date: str, text: str, mood: str) -> dict:
        entry = {"date": date, "text": text, "mood": mood}
        missing = [k for k, v in entry.items() if not v]
        if missing:
            raise EntryValidationError(f"Missing required field(s): {', '.join(missing)}")

        try:
            res = self.client.table(self.table).insert(entry).execute()
        except APIError as e:
            # the unique constraint on date is what actually guards against
            # two concurrent creates for the same day
            if e.code == UNIQUE_VIOLATION:
                raise EntryExistsError(date) from e
            raise

        return res.data[0]

    def list_all(self) -> List[dict]:
        res = (
            self.client
            .table(self.table)
            .select("*")
            .order("date", desc=True)
            .execute()
        )
        return res.data
