"""
Incident persistence.

Two backends with the same three operations (add, list, delete):
- FileIncidentStore: JSON array in one file (default)
- FirestoreIncidentStore: "incidents" collection

The enrichment pipeline only writes here; it never reads back.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional
import json
import logging
import threading

from pydantic import ValidationError

from saferoute.core.settings import settings
from saferoute.models.incident import Incident
from saferoute.utils.time_periods import filter_by_time_period

logger = logging.getLogger(__name__)


def _to_document(incident: Incident) -> dict:
    return incident.model_dump(mode="json", by_alias=True)


def _from_documents(documents) -> List[Incident]:
    incidents = []
    for document in documents:
        if not isinstance(document, dict):
            logger.warning(f"Skipping incident record that is not an object: {document!r}")
            continue
        try:
            incidents.append(Incident.model_validate(document))
        except ValidationError as e:
            logger.warning(f"Skipping unreadable incident record {document.get('id')}: {e}")
    return incidents


class IncidentStore(ABC):

    @abstractmethod
    def add(self, incident: Incident) -> Incident:
        pass

    @abstractmethod
    def all(self) -> List[Incident]:
        """Every stored incident, oldest first."""
        pass

    @abstractmethod
    def delete(self, incident_id: str) -> bool:
        """Returns False if no incident has that id."""
        pass

    def list(self, time_period: Optional[str] = None) -> List[Incident]:
        return filter_by_time_period(self.all(), time_period)


class FileIncidentStore(IncidentStore):
    """JSON-file store. The file and its directory are created on first use."""

    def __init__(self, path: str):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _ensure_file(self) -> None:
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("[]", encoding="utf-8")

    def _read(self) -> list:
        self._ensure_file()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error reading incidents from {self.path}: {e}")
            return []
        if not isinstance(data, list):
            logger.error(f"Incident file {self.path} does not hold a JSON array")
            return []
        return data

    def _write(self, documents: list) -> None:
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(documents, indent=2), encoding="utf-8")
        tmp_path.replace(self.path)

    def add(self, incident: Incident) -> Incident:
        with self._lock:
            documents = self._read()
            documents.append(_to_document(incident))
            self._write(documents)
        return incident

    def all(self) -> List[Incident]:
        with self._lock:
            documents = self._read()
        return _from_documents(documents)

    def delete(self, incident_id: str) -> bool:
        with self._lock:
            documents = self._read()
            remaining = [d for d in documents if not (isinstance(d, dict) and d.get("id") == incident_id)]
            if len(remaining) == len(documents):
                return False
            self._write(remaining)
        return True


class FirestoreIncidentStore(IncidentStore):
    """Firestore store; documents are keyed by incident id."""

    COLLECTION = "incidents"

    def __init__(self, db=None):
        if db is None:
            from saferoute.config.firebase import get_db
            db = get_db()
        self.db = db

    def add(self, incident: Incident) -> Incident:
        self.db.collection(self.COLLECTION).document(incident.id).set(_to_document(incident))
        return incident

    def all(self) -> List[Incident]:
        docs = self.db.collection(self.COLLECTION).order_by("createdAt").stream()
        return _from_documents(doc.to_dict() for doc in docs)

    def delete(self, incident_id: str) -> bool:
        doc_ref = self.db.collection(self.COLLECTION).document(incident_id)
        if not doc_ref.get().exists:
            return False
        doc_ref.delete()
        return True


# Global store instance (singleton)
_store: Optional[IncidentStore] = None


def get_incident_store() -> IncidentStore:
    global _store
    if _store is None:
        backend = (settings.STORAGE_BACKEND or "file").lower()
        if backend == "firestore":
            _store = FirestoreIncidentStore()
            logger.info("Incident store: firestore")
        else:
            _store = FileIncidentStore(settings.DATA_FILE_PATH)
            logger.info(f"Incident store: file ({settings.DATA_FILE_PATH})")
    return _store
