# conftest.py
import pytest

from story_social import create_app

@pytest.fixture
def app(tmp_path):
    """App on the local filesystem backend, one fresh storage directory per test."""
    app = create_app('testing', {'LOCAL_STORAGE_ROOT': str(tmp_path / 'storage')})
    yield app

@pytest.fixture
def client(app):
    return app.test_client()

@pytest.fixture
def storage(app):
    return app.services['storage']
