from __future__ import annotations

import random
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Callable, Dict, Iterator, List, Sequence

import pytest

from src.domain.entities.energy import EnergyGenerationRecord
from src.domain.entities.weather import WeatherForecast, WeatherObservation

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class ScriptedRandom(random.Random):
    """Random source replaying a fixed sequence of ``random()`` draws."""

    def __init__(self, draws: Sequence[float]) -> None:
        super().__init__(0)
        self._draws = list(draws)
        self.calls = 0

    def random(self) -> float:
        value = self._draws[self.calls % len(self._draws)]
        self.calls += 1
        return value


class MutableClock:
    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture()
def scripted_random() -> Callable[[Sequence[float]], ScriptedRandom]:
    return ScriptedRandom


@pytest.fixture()
def clock() -> MutableClock:
    return MutableClock(datetime(2025, 10, 12, 8, 0, tzinfo=timezone.utc))


@pytest.fixture()
def sample_forecast() -> WeatherForecast:
    return WeatherForecast(
        latitude=6.9271,
        longitude=79.8612,
        timezone="Asia/Colombo",
        current=WeatherObservation(
            temperature=29.46,
            humidity=78,
            weather_code=1,
            cloud_cover=12,
            wind_speed=9.84,
        ),
        hourly_cloud_cover=[float(i) for i in range(48)],
        hourly_direct_radiation=[float(i * 10) for i in range(48)],
    )


@pytest.fixture()
def sample_record() -> EnergyGenerationRecord:
    return EnergyGenerationRecord(
        serial_number="SU-0001",
        timestamp=datetime(2025, 7, 15, 12, 0, tzinfo=timezone.utc),
        energy_generated=412,
        interval_hours=2,
    )


class FakeCursor:
    def __init__(self, documents: Sequence[Dict[str, Any]]):
        self._documents = list(documents)
        self._skip = 0
        self._limit: int | None = None

    def sort(self, key: str | None = None, direction: int = 1) -> "FakeCursor":
        if key:
            self._documents.sort(key=lambda doc: doc[key], reverse=direction < 0)
        return self

    def skip(self, amount: int) -> "FakeCursor":
        self._skip = amount
        return self

    def limit(self, amount: int) -> "FakeCursor":
        self._limit = amount
        return self

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        docs = self._documents[self._skip :]
        if self._limit:
            docs = docs[: self._limit]
        return iter(docs)


class FakeCollection:
    def __init__(self) -> None:
        self.documents: Dict[str, Dict[str, Any]] = {}
        self.inserts: List[Dict[str, Any]] = []
        self.last_query: Dict[str, Any] | None = None
        self.dropped_indexes: List[str] = []
        self.created_indexes: List[tuple[Any, ...]] = []

    def find(self, query: Dict[str, Any]) -> FakeCursor:
        self.last_query = query
        results = [doc for doc in self.documents.values() if self._matches(doc, query)]
        return FakeCursor(results)

    def insert_one(self, document: Dict[str, Any]) -> Any:
        self.inserts.append(document)
        self.documents[document["id"]] = document
        return SimpleNamespace(acknowledged=True, inserted_id=document["id"])

    def insert_many(self, documents: List[Dict[str, Any]], ordered: bool = True) -> Any:
        for document in documents:
            self.insert_one(document)
        return SimpleNamespace(
            acknowledged=True, inserted_ids=[doc["id"] for doc in documents]
        )

    def delete_many(self, query: Dict[str, Any]) -> Any:
        matching = [
            key for key, doc in self.documents.items() if self._matches(doc, query)
        ]
        for key in matching:
            del self.documents[key]
        return SimpleNamespace(deleted_count=len(matching), acknowledged=True)

    def drop_index(self, index_name: str) -> None:
        self.dropped_indexes.append(index_name)

    def create_index(self, keys: Any, name: str | None = None, **kwargs: Any) -> Any:
        self.created_indexes.append((keys, name, kwargs))
        return name or keys

    @staticmethod
    def _matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
        for key, value in query.items():
            if document.get(key) != value:
                return False
        return True


class FakeMongoDatabase:
    def __init__(self) -> None:
        self.collections: Dict[str, FakeCollection] = {}
        self.closed = False

    def get_collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())

    async def find_many(
        self,
        collection_name: str,
        query: Dict[str, Any],
        sort_by: str | None = None,
        sort_direction: int = 1,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Dict[str, Any]]:
        cursor = self.get_collection(collection_name).find(query)
        cursor.sort(sort_by, sort_direction)
        cursor.skip(skip)
        cursor.limit(limit)
        return list(cursor)

    async def insert_one(self, collection_name: str, document: Dict[str, Any]) -> Any:
        self.get_collection(collection_name).insert_one(document)
        return document

    async def insert_many(
        self, collection_name: str, documents: Sequence[Dict[str, Any]]
    ) -> int:
        if not documents:
            return 0
        result = self.get_collection(collection_name).insert_many(list(documents))
        return len(result.inserted_ids)

    async def delete_many(self, collection_name: str, query: Dict[str, Any]) -> int:
        return self.get_collection(collection_name).delete_many(query).deleted_count

    async def create_indexes(self) -> None:
        pass

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def fake_mongo_database() -> FakeMongoDatabase:
    return FakeMongoDatabase()


@pytest.fixture()
def dummy_now() -> datetime:
    return datetime.now(timezone.utc)
