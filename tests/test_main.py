import json
import logging

from rfapi import __main__ as entry


def test_main_exports_docs_and_runs(tmp_path, monkeypatch):
    for name in ('HOST', 'REQUEST_BODY_MAX_BYTES', 'LOG_LEVEL', 'DEBUG'):
        monkeypatch.delenv('RFAPI_' + name, raising=False)

    docs = tmp_path / 'docs.json'
    monkeypatch.setenv('RFAPI_DOCS_PATH', str(docs))
    monkeypatch.setenv('RFAPI_PORT', '8123')

    monkeypatch.setattr(entry, 'configure_logging', lambda level: None)
    calls = []
    monkeypatch.setattr('flask.Flask.run', lambda self, **kw: calls.append(kw))

    entry.main()

    assert json.loads(docs.read_text())['info']['title'] == 'rfapi'
    assert calls == [{'host': '0.0.0.0', 'port': 8123, 'debug': False, 'threaded': True}]


def test_export_docs_disabled(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    entry.export_docs(None, '')
    assert list(tmp_path.iterdir()) == []


def test_configure_logging(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, 'handlers', [])
    monkeypatch.setattr(root, 'level', root.level)

    entry.configure_logging('debug')

    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
