import os

from dotenv import load_dotenv

load_dotenv()


BASE_DIR = os.path.abspath(os.path.dirname(__file__))


class Config:
    FLASK_HOST = os.getenv('FLASK_HOST', '0.0.0.0')
    FLASK_PORT = int(os.getenv('FLASK_PORT', '8000'))
    FLASK_DEBUG = os.getenv('FLASK_DEBUG', 'False').lower() == 'true'

    APP_VERSION = '1.0.0'
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()


    # Generated ids are drawn from [0, MOVIE_ID_LIMIT)
    MOVIE_ID_LIMIT = int(os.getenv('MOVIE_ID_LIMIT', '1000000'))
    LOAD_SAMPLE_MOVIES = os.getenv('LOAD_SAMPLE_MOVIES', 'False').lower() == 'true'


    WEB_SERVER_HOST = os.getenv('WEB_SERVER_HOST', '0.0.0.0')
    WEB_SERVER_PORT = int(os.getenv('WEB_SERVER_PORT', '8080'))
    STATIC_DIR = os.getenv('STATIC_DIR', os.path.join(BASE_DIR, 'static'))
