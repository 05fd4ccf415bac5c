import json

from rfapi.openapi import build_openapi, default_openapi, write_openapi


def test_info():
    doc = default_openapi()
    assert doc['openapi'] == '3.0.3'
    assert doc['info'] == {
        'title': 'rfapi',
        'version': 'v0.1.0',
        'description': 'forever in progress',
        'contact': {'name': 'sakti'},
    }


def test_optional_info_fields_omitted():
    doc = build_openapi('svc', '1.0')
    assert doc['info'] == {'title': 'svc', 'version': '1.0'}


def test_counter_operations():
    counter = default_openapi()['paths']['/counter']
    assert set(counter) == {'get', 'put'}
    assert '204' in counter['put']['responses']
    assert '400' in counter['put']['responses']
    schema = default_openapi()['components']['schemas']['CounterValue']
    assert schema['required'] == ['counter']
    assert schema['properties']['counter']['format'] == 'uint64'


def test_write_openapi(tmp_path):
    path = tmp_path / 'docs.json'
    doc = default_openapi()
    write_openapi(doc, path)
    assert json.loads(path.read_text()) == doc
