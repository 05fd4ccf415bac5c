"""OpenAPI description of the service routes."""

import json

from .counter import U64_MAX

TITLE = 'rfapi'
VERSION = 'v0.1.0'
DESCRIPTION = 'forever in progress'
CONTACT_NAME = 'sakti'


def _error_response(description):
    return {
        'description': description,
        'content': {
            'application/json': {'schema': {'$ref': '#/components/schemas/Error'}},
        },
    }


def build_openapi(title=TITLE, version=VERSION, description=None, contact_name=None):
    info = {'title': title, 'version': version}
    if description:
        info['description'] = description
    if contact_name:
        info['contact'] = {'name': contact_name}

    counter_ref = {'$ref': '#/components/schemas/CounterValue'}

    return {
        'openapi': '3.0.3',
        'info': info,
        'paths': {
            '/': {
                'get': {
                    'operationId': 'index',
                    'responses': {
                        '200': {
                            'description': 'greeting page',
                            'content': {'text/html': {'schema': {'type': 'string'}}},
                        },
                    },
                },
            },
            '/openapi.json': {
                'get': {
                    'operationId': 'docs',
                    'responses': {
                        '200': {
                            'description': 'this document',
                            'content': {'application/json': {'schema': {'type': 'object'}}},
                        },
                    },
                },
            },
            '/counter': {
                'get': {
                    'operationId': 'example_api_get_counter',
                    'summary': 'Fetch the current value of the counter.',
                    'responses': {
                        '200': {
                            'description': 'successful operation',
                            'content': {'application/json': {'schema': counter_ref}},
                        },
                    },
                },
                'put': {
                    'operationId': 'example_api_put_counter',
                    'summary': 'Update the current value of the counter.',
                    'description': 'The special value of 10 is not allowed.',
                    'requestBody': {
                        'required': True,
                        'content': {'application/json': {'schema': counter_ref}},
                    },
                    'responses': {
                        '204': {'description': 'resource updated'},
                        '400': _error_response('invalid counter value'),
                        '413': _error_response('request body too large'),
                    },
                },
            },
        },
        'components': {
            'schemas': {
                'CounterValue': {
                    'type': 'object',
                    'properties': {
                        'counter': {
                            'type': 'integer',
                            'format': 'uint64',
                            'minimum': 0,
                            'maximum': U64_MAX,
                        },
                    },
                    'required': ['counter'],
                },
                'Error': {
                    'type': 'object',
                    'properties': {
                        'error_code': {'type': 'string'},
                        'message': {'type': 'string'},
                    },
                    'required': ['message'],
                },
            },
        },
    }


def default_openapi():
    return build_openapi(TITLE, VERSION, description=DESCRIPTION, contact_name=CONTACT_NAME)


def write_openapi(document, path):
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(document, f, indent=2)
        f.write('\n')
