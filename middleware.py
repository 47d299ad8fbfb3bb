import functools

from flask import make_response


JSON_CONTENT_TYPE = 'application/json'


def set_json_content_type(f):
    """Force Content-Type: application/json on whatever the view returns"""
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        response = make_response(f(*args, **kwargs))
        # Body is buffered until the view returns, so this always wins
        response.headers['Content-Type'] = JSON_CONTENT_TYPE
        return response

    return wrapper
