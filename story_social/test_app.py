# story_social/test_app.py
import pytest

from story_social import create_app
from story_social.services.storage_service import LocalStorageService

def test_testing_app_uses_local_storage(app):
    assert app.config['TESTING'] is True
    assert isinstance(app.services['storage'], LocalStorageService)
    assert set(app.services) == {'storage', 'comments', 'reactions'}

def test_health(client):
    res = client.get('/health')
    assert res.status_code == 200
    assert res.get_json() == {'status': 'ok'}

def test_unknown_route_uses_failure_envelope(client):
    res = client.get('/api/nothing-here')
    assert res.status_code == 404
    body = res.get_json()
    assert body['status'] == 'failure'
    assert body['error_code'] == 'NOT_FOUND'

def test_unknown_config_name():
    with pytest.raises(ValueError):
        create_app('staging')

def test_firebase_backend_needs_credentials(tmp_path):
    with pytest.raises(FileNotFoundError):
        create_app('testing', {
            'STORAGE_BACKEND': 'firebase',
            'FIREBASE_CREDENTIALS_PATH': str(tmp_path / 'missing.json'),
        })

def test_unknown_storage_backend(tmp_path):
    with pytest.raises(ValueError):
        create_app('testing', {'STORAGE_BACKEND': 's3', 'LOCAL_STORAGE_ROOT': str(tmp_path)})

def test_custom_document_keys(tmp_path):
    app = create_app('testing', {
        'LOCAL_STORAGE_ROOT': str(tmp_path),
        'COMMENTS_PREFIX': 'story-comments',
        'REACTIONS_DOCUMENT': 'story-reactions/all.json',
    })
    client = app.test_client()
    client.post('/api/comments/', json={'storyId': 'S1', 'commentId': '1', 'commentText': 'x', 'postedBy': {'id': 'u1'}})
    client.post('/api/reactions/', json={'storyId': 'S1', 'userId': 'u1', 'reaction': 'like'})

    storage = app.services['storage']
    assert storage.exists('story-comments/S1.json')
    assert storage.exists('story-reactions/all.json')

def test_store_failure_is_internal_error(app, client, monkeypatch):
    def failing_exists(key):
        from story_social.services.storage_service import DocumentStoreError
        raise DocumentStoreError("bucket unavailable")
    monkeypatch.setattr(app.services['storage'], 'exists', failing_exists)

    res = client.get('/api/reactions/', query_string={'userId': 'U1', 'storyId': 'S1'})
    assert res.status_code == 500
    assert res.get_json()['error_code'] == 'INTERNAL_SERVER_ERROR'
