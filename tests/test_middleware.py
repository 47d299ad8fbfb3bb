from flask import Flask, Response

from middleware import set_json_content_type


def make_app():
    app = Flask(__name__)

    @app.route('/empty')
    @set_json_content_type
    def empty():
        return ''

    @app.route('/plain')
    @set_json_content_type
    def plain():
        return Response('text', mimetype='text/plain')

    @app.route('/tuple')
    @set_json_content_type
    def with_status():
        return 'Bad Request', 400

    return app


def test_sets_content_type():
    response = make_app().test_client().get('/empty')

    assert response.headers['Content-Type'] == 'application/json'


def test_overwrites_present_content_type():
    response = make_app().test_client().get('/plain')

    assert response.headers['Content-Type'] == 'application/json'
    assert response.data == b'text'


def test_keeps_status_code():
    response = make_app().test_client().get('/tuple')

    assert response.status_code == 400
    assert response.headers['Content-Type'] == 'application/json'
