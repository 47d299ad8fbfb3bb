from flask import Flask, request
from config import Config
import logging


logging.basicConfig(
    level=Config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


app = Flask(__name__, static_folder=Config.STATIC_DIR, static_url_path='')
app.config.from_object(Config)


@app.route('/')
def index():
    return app.send_static_file('index.html')


@app.route('/hello', methods=['GET', 'POST', 'PUT', 'DELETE', 'PATCH'])
def hello():
    if request.method != 'GET':
        return 'method is not supported', 404

    return 'hello!'


@app.route('/form', methods=['GET', 'POST'])
def form():
    if request.method != 'POST':
        return 'method is not supported', 405

    name = request.form.get('name', '')
    address = request.form.get('address', '')

    logger.info(f"Form submitted by {name!r}")

    return (
        "POST request successful\n"
        f"Name = {name}\n"
        f"Address = {address}\n"
    )


if __name__ == '__main__':
    logger.info(f"Starting server at {Config.WEB_SERVER_PORT}")
    app.run(
        host=Config.WEB_SERVER_HOST,
        port=Config.WEB_SERVER_PORT,
        debug=Config.FLASK_DEBUG
    )
