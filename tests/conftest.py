import os
import random
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import app as movies_app  # noqa: E402
from registry.movie_registry import MovieRegistry  # noqa: E402
from registry.sample_movies import load_sample_movies  # noqa: E402


@pytest.fixture
def registry():
    return MovieRegistry(id_limit=1000000, rng=random.Random(1234))


@pytest.fixture
def sample_registry(registry):
    load_sample_movies(registry)
    return registry


def _client_for(registry):
    flask_app = movies_app.app
    flask_app.config['TESTING'] = True
    previous = flask_app.extensions['movie_registry']
    flask_app.extensions['movie_registry'] = registry
    try:
        with flask_app.test_client() as client:
            yield client
    finally:
        flask_app.extensions['movie_registry'] = previous


@pytest.fixture
def client(registry):
    yield from _client_for(registry)


@pytest.fixture
def sample_client(sample_registry):
    yield from _client_for(sample_registry)
