import asyncio
import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Dict, Optional

from .config import settings
from kisan_advisor.models.session import FarmerSession

logger = logging.getLogger(__name__)

SessionMutation = Callable[[FarmerSession], None]

_session_store: Optional["SessionStore"] = None


class SessionStore(ABC):
    """Persistence port for per-farmer dashboard state."""

    @abstractmethod
    async def get(self, farmer_id: str) -> Optional[FarmerSession]: ...

    @abstractmethod
    async def save(self, session: FarmerSession) -> FarmerSession: ...

    @abstractmethod
    async def update(
        self, farmer_id: str, mutate: SessionMutation
    ) -> Optional[FarmerSession]:
        """
        Apply ``mutate`` to the stored session and persist it as one step.

        Returns the updated session, or None when the farmer has no session.
        If ``mutate`` raises, nothing is written.
        """

    @abstractmethod
    async def delete(self, farmer_id: str) -> bool: ...


class MemorySessionStore(SessionStore):
    def __init__(self) -> None:
        self._sessions: Dict[str, FarmerSession] = {}

    async def get(self, farmer_id: str) -> Optional[FarmerSession]:
        session = self._sessions.get(farmer_id)
        return session.model_copy(deep=True) if session else None

    async def save(self, session: FarmerSession) -> FarmerSession:
        self._sessions[session.farmer_id] = session.model_copy(deep=True)
        return session

    async def update(
        self, farmer_id: str, mutate: SessionMutation
    ) -> Optional[FarmerSession]:
        stored = self._sessions.get(farmer_id)
        if stored is None:
            return None
        session = stored.model_copy(deep=True)
        mutate(session)
        self._sessions[farmer_id] = session.model_copy(deep=True)
        return session

    async def delete(self, farmer_id: str) -> bool:
        return self._sessions.pop(farmer_id, None) is not None


class JsonFileSessionStore(SessionStore):
    """
    Keeps every session in a single JSON document keyed by farmer id.
    Writes go to a temporary file that replaces the document atomically.
    """

    def __init__(self, path: str) -> None:
        self.path = Path(path)
        self._lock = asyncio.Lock()

    def _read_all(self) -> Dict[str, dict]:
        if not self.path.exists():
            return {}
        with self.path.open("r", encoding="utf-8") as handle:
            return json.load(handle)

    def _write_all(self, documents: Dict[str, dict]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(documents, handle, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except Exception:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    async def get(self, farmer_id: str) -> Optional[FarmerSession]:
        async with self._lock:
            documents = await asyncio.to_thread(self._read_all)
        document = documents.get(farmer_id)
        return FarmerSession.model_validate(document) if document else None

    async def save(self, session: FarmerSession) -> FarmerSession:
        async with self._lock:
            documents = await asyncio.to_thread(self._read_all)
            documents[session.farmer_id] = session.model_dump(mode="json")
            await asyncio.to_thread(self._write_all, documents)
        return session

    async def update(
        self, farmer_id: str, mutate: SessionMutation
    ) -> Optional[FarmerSession]:
        async with self._lock:
            documents = await asyncio.to_thread(self._read_all)
            document = documents.get(farmer_id)
            if not document:
                return None
            session = FarmerSession.model_validate(document)
            mutate(session)
            documents[farmer_id] = session.model_dump(mode="json")
            await asyncio.to_thread(self._write_all, documents)
        return session

    async def delete(self, farmer_id: str) -> bool:
        async with self._lock:
            documents = await asyncio.to_thread(self._read_all)
            if documents.pop(farmer_id, None) is None:
                return False
            await asyncio.to_thread(self._write_all, documents)
        return True


def get_session_store() -> SessionStore:
    global _session_store
    if _session_store is None:
        if settings.SESSION_STORE == "file":
            logger.info("Using JSON file session store at %s", settings.SESSION_STORE_PATH)
            _session_store = JsonFileSessionStore(settings.SESSION_STORE_PATH)
        elif settings.SESSION_STORE == "memory":
            _session_store = MemorySessionStore()
        else:
            raise ValueError(f"Unknown SESSION_STORE '{settings.SESSION_STORE}'")
    return _session_store
