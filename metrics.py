from prometheus_client import Counter, Histogram, Gauge, generate_latest, CONTENT_TYPE_LATEST
from flask import Response, request
import time
import functools


REQUEST_COUNT = Counter(
    'movies_request_count',
    'Total Movie API Request Count',
    ['method', 'endpoint', 'http_status']
)

REQUEST_DURATION = Histogram(
    'movies_request_duration_seconds',
    'Movie API Request Duration',
    ['method', 'endpoint']
)


MOVIES_CREATED = Counter(
    'movies_created_total',
    'Total movies created'
)

MOVIES_UPDATED = Counter(
    'movies_updated_total',
    'Total movies replaced'
)


CLIENT_ERROR_COUNT = Counter(
    'movies_client_errors_total',
    'Requests rejected for a bad or unknown movie id',
    ['reason']
)


REGISTRY_SIZE = Gauge(
    'movies_registry_size',
    'Number of movies held in the registry'
)


def track_request(f):
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        start_time = time.time()

        try:
            response = f(*args, **kwargs)
            status_code = response.status_code if hasattr(response, 'status_code') else 200

            REQUEST_COUNT.labels(
                method=request.method,
                endpoint=f.__name__,
                http_status=status_code
            ).inc()

            duration = time.time() - start_time
            REQUEST_DURATION.labels(
                method=request.method,
                endpoint=f.__name__
            ).observe(duration)

            return response

        except Exception:
            REQUEST_COUNT.labels(
                method=request.method,
                endpoint=f.__name__,
                http_status=500
            ).inc()
            raise

    return wrapper


def metrics_endpoint():
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)
