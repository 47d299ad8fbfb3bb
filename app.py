from flask import Flask, jsonify, request, current_app
from flask_cors import CORS
from config import Config
import logging
import re

from registry.models import Movie, MovieDecodeError
from registry.movie_registry import MovieRegistry, RegistryFullError
from registry.sample_movies import load_sample_movies
from services.registry_check import check_registry
from middleware import set_json_content_type

from metrics import (
    metrics_endpoint, track_request,
    MOVIES_CREATED, MOVIES_UPDATED,
    CLIENT_ERROR_COUNT, REGISTRY_SIZE
)

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

MOVIE_ID_PATTERN = re.compile(r'\d+', re.ASCII)

INTERNAL_ERROR_MESSAGE = 'An error occurred while processing your request'


app = Flask(__name__)
app.config.from_object(Config)
CORS(app)
app.extensions['movie_registry'] = MovieRegistry(id_limit=Config.MOVIE_ID_LIMIT)

if Config.LOAD_SAMPLE_MOVIES:
    REGISTRY_SIZE.set(load_sample_movies(app.extensions['movie_registry']))


def get_registry():
    return current_app.extensions['movie_registry']


def respond_internal_server_error(err):
    logger.error(f"Internal Server Error: {err}")
    return INTERNAL_ERROR_MESSAGE, 500


def is_valid_movie_id(movie_id):
    return MOVIE_ID_PATTERN.fullmatch(movie_id) is not None


@app.route('/info')
def info():
    import sys
    return jsonify({
        'app_name': 'Movie Registry',
        'python_version': sys.version.split()[0],
        'movies': len(get_registry())
    })


@app.route('/health')
@track_request
def health():
    return jsonify({
        'status': 'healthy',
        'service': 'movie-registry',
        'version': Config.APP_VERSION
    }), 200


@app.route('/check/registry')
def check_registry_endpoint():
    result = check_registry(get_registry())
    status_code = 200 if result['status'] == 'healthy' else 503
    return jsonify(result), status_code


@app.route('/movies', methods=['GET'])
@track_request
@set_json_content_type
def get_movies():
    movies = get_registry().list()

    try:
        return jsonify({movie_id: movie.to_dict() for movie_id, movie in movies.items()})
    except (TypeError, ValueError) as e:
        return respond_internal_server_error(e)


@app.route('/movies/<movie_id>', methods=['GET'])
@track_request
@set_json_content_type
def get_movie(movie_id):
    if not is_valid_movie_id(movie_id):
        logger.warning(f"Invalid ID format: {movie_id}")
        CLIENT_ERROR_COUNT.labels(reason='invalid_id').inc()
        return 'Bad Request', 400

    movie = get_registry().get(movie_id)

    if movie is None:
        logger.warning(f"Movie with id {movie_id} does not exist")
        CLIENT_ERROR_COUNT.labels(reason='not_found').inc()
        return '404 not found', 404

    try:
        return jsonify({movie_id: movie.to_dict()})
    except (TypeError, ValueError) as e:
        return respond_internal_server_error(e)


@app.route('/movies', methods=['POST'])
@app.route('/movies/', methods=['POST'])
@track_request
@set_json_content_type
def create_movie():
    try:
        movie = Movie.from_json(request.get_data())
    except MovieDecodeError as e:
        return respond_internal_server_error(e)

    registry = get_registry()

    try:
        movie = registry.insert(movie)
    except RegistryFullError as e:
        return respond_internal_server_error(e)

    MOVIES_CREATED.inc()
    REGISTRY_SIZE.set(len(registry))
    logger.info(f"Created movie {movie.id}: {movie.title}")

    try:
        return jsonify(movie.to_dict())
    except (TypeError, ValueError) as e:
        return respond_internal_server_error(e)


@app.route('/movies/<movie_id>', methods=['PUT'])
@track_request
@set_json_content_type
def update_movie(movie_id):
    if not is_valid_movie_id(movie_id):
        logger.warning(f"Invalid ID format: {movie_id}")
        CLIENT_ERROR_COUNT.labels(reason='invalid_id').inc()
        return 'Bad Request', 400

    registry = get_registry()

    if movie_id not in registry:
        logger.warning(f"Movie with id: {movie_id} does not exist")
        CLIENT_ERROR_COUNT.labels(reason='not_found').inc()
        return '404 not found', 404

    try:
        movie = Movie.from_json(request.get_data())
    except MovieDecodeError as e:
        return respond_internal_server_error(e)

    movie = registry.replace(movie_id, movie)

    # removed between the existence check and the write
    if movie is None:
        CLIENT_ERROR_COUNT.labels(reason='not_found').inc()
        return '404 not found', 404

    MOVIES_UPDATED.inc()
    logger.info(f"Updated movie {movie_id}")

    try:
        return jsonify(movie.to_dict())
    except (TypeError, ValueError) as e:
        return respond_internal_server_error(e)


@app.route('/metrics')
@track_request
def metrics():
    return metrics_endpoint()


if __name__ == '__main__':
    app.run(
        host=Config.FLASK_HOST,
        port=Config.FLASK_PORT,
        debug=Config.FLASK_DEBUG
    )
