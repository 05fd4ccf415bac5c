import logging

from flask import Blueprint, Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from .config import Config
from .context import ApiContext
from .counter import CounterValue, InvalidInput, get_counter, put_counter
from .errors import ApiError, BadInput, InvalidRequestBody
from .openapi import default_openapi

logger = logging.getLogger(__name__)

EXTENSION = 'rfapi'

ERROR_CODES = {
    413: 'PayloadTooLarge',
}

api = Blueprint('api', __name__)


def api_context():
    return current_app.extensions[EXTENSION]


@api.route('/', methods=['GET'])
def index():
    return 'testing abc', 200, {'Content-Type': 'text/html'}


@api.route('/openapi.json', methods=['GET'])
def docs():
    return jsonify(current_app.config['OPENAPI_DOC'])


@api.route('/counter', methods=['GET'])
def counter_get():
    return jsonify(get_counter(api_context()).to_dict())


@api.route('/counter', methods=['PUT'])
def counter_put():
    payload = request.get_json(silent=True)
    if payload is None:
        raise InvalidRequestBody('request body must be JSON')
    update = CounterValue.from_dict(payload)

    result = put_counter(api_context(), update)
    if isinstance(result, InvalidInput):
        logger.info('rejected counter update: %s', result.message)
        raise BadInput(result.message)

    logger.info('counter set to %d', update.counter)
    return '', 204


def handle_api_error(e):
    return jsonify(e.to_dict()), e.status_code


def handle_http_exception(e):
    response = e.get_response()
    response.data = current_app.json.dumps({
        'error_code': ERROR_CODES.get(e.code, ''.join(e.name.split())),
        'message': e.description,
    })
    response.content_type = 'application/json'
    return response


def create_app(config=None, context=None):
    if config is None:
        config = Config()

    app = Flask(__name__)
    app.config['MAX_CONTENT_LENGTH'] = config.request_body_max_bytes
    app.config['OPENAPI_DOC'] = default_openapi()
    app.extensions[EXTENSION] = context if context is not None else ApiContext()

    app.register_blueprint(api)
    app.register_error_handler(ApiError, handle_api_error)
    app.register_error_handler(HTTPException, handle_http_exception)

    return app
