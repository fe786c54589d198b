"""Document store backends plus low-level JSON file I/O with locking."""
import copy
import json
import logging
import os
import shutil
import sys
import tempfile
import time
import uuid
from contextlib import contextmanager
from threading import Lock
from typing import Any, Dict, List

if sys.platform != "win32":
    import fcntl

logger = logging.getLogger(__name__)


def load_json(file_path: str, retry_count: int = 3, retry_delay: float = 0.1) -> Dict[str, Any]:
    """
    Load and parse a JSON file with UTF-8 encoding.

    Args:
        file_path: Path to JSON file
        retry_count: Number of attempts for permission errors (default: 3)
        retry_delay: Delay in seconds between attempts (default: 0.1)

    Returns:
        dict: Parsed JSON content

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If JSON is malformed
        PermissionError: If file not readable after retries
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    for attempt in range(retry_count):
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except PermissionError:
            if attempt < retry_count - 1:
                time.sleep(retry_delay)
        except json.JSONDecodeError as e:
            raise json.JSONDecodeError(f"Malformed JSON in {file_path}: {e.msg}", e.doc, e.pos)

    raise PermissionError(f"Cannot read file after {retry_count} attempts: {file_path}")


def save_json(file_path: str, data: Dict[str, Any], backup: bool = True) -> None:
    """
    Save data to a JSON file atomically (temp file + rename).

    Args:
        file_path: Path to JSON file
        data: Dictionary to save
        backup: If True, copy the current file to <file>.backup first

    Raises:
        IOError: If the backup or the write fails
    """
    dir_path = os.path.dirname(file_path)
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)

    if backup and os.path.exists(file_path):
        try:
            shutil.copy2(file_path, f"{file_path}.backup")
        except OSError as e:
            raise IOError(f"Failed to create backup: {e}") from e

    temp_fd, temp_path = tempfile.mkstemp(dir=dir_path or ".", prefix=".tmp_", suffix=".json")

    try:
        with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
            f.flush()
            os.fsync(f.fileno())
        os.replace(temp_path, file_path)
    except Exception as e:
        if os.path.exists(temp_path):
            os.remove(temp_path)
        raise IOError(f"Failed to write file {file_path}: {e}") from e


@contextmanager
def lock_file(file_path: str, timeout: float = 5.0):
    """
    Hold an exclusive lock on <file_path>.lock for the duration of the block.

    The target file itself does not need to exist yet, so the first writer
    of a new store can lock it too.

    Usage:
        with lock_file("data/registrations.json"):
            data = load_json("data/registrations.json")
            ...
            save_json("data/registrations.json", data)

    Raises:
        TimeoutError: If unable to acquire the lock within timeout
    """
    lock_path = f"{file_path}.lock"
    dir_path = os.path.dirname(lock_path)
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)

    start_time = time.time()

    if sys.platform == "win32":
        while True:
            try:
                lock_fd = os.open(lock_path, os.O_CREAT | os.O_EXCL | os.O_RDWR)
                break
            except FileExistsError:
                if time.time() - start_time > timeout:
                    raise TimeoutError(f"Could not acquire lock on {file_path} within {timeout}s")
                time.sleep(0.05)
        try:
            yield
        finally:
            os.close(lock_fd)
            os.remove(lock_path)
    else:
        with open(lock_path, "a") as lock_handle:
            while True:
                try:
                    fcntl.flock(lock_handle.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
                    break
                except OSError:
                    if time.time() - start_time > timeout:
                        raise TimeoutError(f"Could not acquire lock on {file_path} within {timeout}s")
                    time.sleep(0.05)
            try:
                yield
            finally:
                fcntl.flock(lock_handle.fileno(), fcntl.LOCK_UN)


def _new_document_id() -> str:
    return uuid.uuid4().hex


class JsonCollection:
    """Named collection inside a JsonDocumentStore."""

    def __init__(self, store: "JsonDocumentStore", name: str):
        self._store = store
        self.name = name

    def add(self, document: Dict[str, Any]) -> str:
        """
        Append a document under a freshly generated id.

        Returns:
            The new document id

        Raises:
            TimeoutError: If the store lock can't be acquired
            IOError: If the file can't be written
            json.JSONDecodeError: If the store file is corrupt
        """
        doc_id = _new_document_id()

        with lock_file(self._store.path, timeout=self._store.lock_timeout):
            # Reload under the lock to pick up other writers' appends
            data = self._store.read_all()
            documents = data["collections"].setdefault(self.name, [])
            documents.append({"id": doc_id, **document})
            save_json(self._store.path, data, backup=self._store.backup)

        logger.debug(f"Appended document {doc_id} to {self.name}")
        return doc_id

    def documents(self) -> List[Dict[str, Any]]:
        """Return a copy of every document stored in this collection."""
        return list(self._store.read_all()["collections"].get(self.name, []))


class JsonDocumentStore:
    """
    Document store kept in a single UTF-8 JSON file.

    File layout:
        {"collections": {"<name>": [{"id": "...", ...}, ...]}}
    """

    def __init__(self, path: str, backup: bool = True, lock_timeout: float = 5.0):
        self.path = path
        self.backup = backup
        self.lock_timeout = lock_timeout

    def collection(self, name: str) -> JsonCollection:
        return JsonCollection(self, name)

    def read_all(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {"collections": {}}

        data = load_json(self.path)
        data.setdefault("collections", {})
        return data


class InMemoryCollection:
    """Named collection inside an InMemoryDocumentStore."""

    def __init__(self, store: "InMemoryDocumentStore", name: str):
        self._store = store
        self.name = name

    def add(self, document: Dict[str, Any]) -> str:
        doc_id = _new_document_id()
        with self._store.lock:
            self._store.data.setdefault(self.name, []).append(
                {"id": doc_id, **copy.deepcopy(document)}
            )
        return doc_id

    def documents(self) -> List[Dict[str, Any]]:
        with self._store.lock:
            return copy.deepcopy(self._store.data.get(self.name, []))


class InMemoryDocumentStore:
    """Process-local document store; contents vanish with the process."""

    def __init__(self):
        self.data: Dict[str, List[Dict[str, Any]]] = {}
        self.lock = Lock()

    def collection(self, name: str) -> InMemoryCollection:
        return InMemoryCollection(self, name)


def create_document_store(backend: str, path: str):
    """
    Build the document store selected by configuration.

    Args:
        backend: "json" or "memory"
        path: JSON file path (ignored by the memory backend)

    Raises:
        ValueError: If backend is unknown
    """
    if backend == "json":
        return JsonDocumentStore(path)
    if backend == "memory":
        logger.warning("Using in-memory document store; registrations will not survive a restart")
        return InMemoryDocumentStore()
    raise ValueError(f"Unknown store backend: {backend}")
