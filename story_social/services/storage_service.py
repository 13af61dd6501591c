# story_social/services/storage_service.py
import json
import logging
import os
import tempfile
from typing import Any, Optional

from flask import Flask
from firebase_admin import storage
from google.api_core import exceptions as gcp_exceptions

class DocumentStoreError(Exception):
    """Reading or writing a stored document failed, or the stored bytes are not a valid document."""

class DocumentNotFoundError(LookupError):
    """A document the operation needs does not exist or is empty."""

def load_json_document(raw: bytes, key: str) -> Any:
    """Decodes a stored UTF-8 JSON document."""
    try:
        return json.loads(raw.decode('utf-8'))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DocumentStoreError(f"Stored document is corrupt: {key}") from e

def dump_json_document(data: Any) -> bytes:
    return json.dumps(data, ensure_ascii=False, separators=(',', ':')).encode('utf-8')

class StorageService:
    """
    Whole-document key -> bytes store.
    Subclasses provide `exists`, `read` and `write`; a write replaces the
    document atomically, readers never see a partial write.
    """

    def init_app(self, app: Flask):
        pass

    def exists(self, key: str) -> bool:
        raise NotImplementedError

    def read(self, key: str) -> Optional[bytes]:
        """Returns the document bytes, or None when the key does not exist."""
        raise NotImplementedError

    def write(self, key: str, data: bytes) -> None:
        raise NotImplementedError

    def read_json(self, key: str) -> Optional[Any]:
        raw = self.read(key)
        if raw is None:
            return None
        return load_json_document(raw, key)

    def write_json(self, key: str, data: Any) -> None:
        self.write(key, dump_json_document(data))

class FirebaseStorageService(StorageService):
    """
    Documents stored as blobs in a Firebase Cloud Storage bucket.
    The bucket is resolved in init_app, after firebase_admin has been initialized.
    """

    def __init__(self, bucket=None):
        self.bucket = bucket

    def init_app(self, app: Flask):
        if self.bucket is not None:
            return
        bucket_name = app.config.get('FIREBASE_STORAGE_BUCKET')
        if not bucket_name:
            raise ValueError("FIREBASE_STORAGE_BUCKET must be set in .env or the config class.")

        self.bucket = storage.bucket(bucket_name)
        logging.info(f"FirebaseStorageService: using bucket '{bucket_name}'")

    def _blob(self, key: str):
        if not self.bucket:
            raise RuntimeError("FirebaseStorageService is not initialized. Call init_app first.")
        return self.bucket.blob(key)

    def exists(self, key: str) -> bool:
        try:
            return self._blob(key).exists()
        except gcp_exceptions.GoogleAPIError as e:
            logging.error(f"Blob existence check failed (key: {key}): {e}", exc_info=True)
            raise DocumentStoreError(f"Could not check document: {key}") from e

    def read(self, key: str) -> Optional[bytes]:
        try:
            return self._blob(key).download_as_bytes()
        except gcp_exceptions.NotFound:
            return None
        except gcp_exceptions.GoogleAPIError as e:
            logging.error(f"Blob download failed (key: {key}): {e}", exc_info=True)
            raise DocumentStoreError(f"Could not read document: {key}") from e

    def write(self, key: str, data: bytes) -> None:
        try:
            self._blob(key).upload_from_string(data, content_type='application/json')
        except gcp_exceptions.GoogleAPIError as e:
            logging.error(f"Blob upload failed (key: {key}): {e}", exc_info=True)
            raise DocumentStoreError(f"Could not write document: {key}") from e

class LocalStorageService(StorageService):
    """Documents stored as files under a root directory. Used for development and tests."""

    def __init__(self, root: Optional[str] = None):
        self.root = root

    def init_app(self, app: Flask):
        if self.root is None:
            self.root = app.config['LOCAL_STORAGE_ROOT']
        os.makedirs(self.root, exist_ok=True)
        logging.info(f"LocalStorageService: using directory '{self.root}'")

    def _path(self, key: str) -> str:
        if self.root is None:
            raise RuntimeError("LocalStorageService is not initialized. Call init_app first.")
        root = os.path.abspath(self.root)
        path = os.path.abspath(os.path.join(root, *key.split('/')))
        if os.path.commonpath([root, path]) != root:
            raise DocumentStoreError(f"Document key escapes the storage root: {key}")
        return path

    def exists(self, key: str) -> bool:
        return os.path.isfile(self._path(key))

    def read(self, key: str) -> Optional[bytes]:
        path = self._path(key)
        try:
            with open(path, 'rb') as f:
                return f.read()
        except FileNotFoundError:
            return None
        except OSError as e:
            logging.error(f"File read failed (key: {key}): {e}", exc_info=True)
            raise DocumentStoreError(f"Could not read document: {key}") from e

    def write(self, key: str, data: bytes) -> None:
        path = self._path(key)
        directory = os.path.dirname(path)
        try:
            os.makedirs(directory, exist_ok=True)
            # Write beside the target, then swap it in.
            fd, tmp_path = tempfile.mkstemp(dir=directory, suffix='.tmp')
            try:
                with os.fdopen(fd, 'wb') as f:
                    f.write(data)
                os.replace(tmp_path, path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
                raise
        except OSError as e:
            logging.error(f"File write failed (key: {key}): {e}", exc_info=True)
            raise DocumentStoreError(f"Could not write document: {key}") from e

def create_storage_service(app: Flask) -> StorageService:
    """Builds and initializes the backend named by STORAGE_BACKEND."""
    backend = app.config.get('STORAGE_BACKEND', 'firebase')
    if backend == 'firebase':
        service = FirebaseStorageService()
    elif backend == 'local':
        service = LocalStorageService()
    else:
        raise ValueError(f"Unknown STORAGE_BACKEND: '{backend}'")
    service.init_app(app)
    return service
