import pytest


def test_imports():
    try:
        import app  # noqa: F401
        import config  # noqa: F401
        import metrics  # noqa: F401
        import middleware  # noqa: F401
        import webserver  # noqa: F401
        assert True
    except ImportError as e:
        pytest.fail(f"Import failed: {e}")


def test_registry_modules():
    try:
        from registry import models  # noqa: F401
        from registry import movie_registry  # noqa: F401
        from registry import sample_movies  # noqa: F401
        assert True
    except ImportError as e:
        pytest.fail(f"Registry module import failed: {e}")


def test_health(client):
    response = client.get('/health')

    assert response.status_code == 200
    assert response.get_json()['status'] == 'healthy'


def test_info_counts_movies(sample_client):
    response = sample_client.get('/info')

    assert response.status_code == 200
    assert response.get_json()['movies'] == 2


def test_metrics_endpoint(client):
    client.post('/movies', data='{"title": "Counted"}')

    response = client.get('/metrics')

    assert response.status_code == 200
    assert b'movies_created_total' in response.data
    assert b'movies_request_count' in response.data


def test_cors_header(client):
    response = client.get('/movies', headers={'Origin': 'http://example.com'})

    assert response.headers.get('Access-Control-Allow-Origin') in ('*', 'http://example.com')
