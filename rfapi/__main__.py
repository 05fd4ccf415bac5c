import logging
import sys

from .app import create_app
from .config import Config
from .openapi import write_openapi

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'

logger = logging.getLogger('rfapi')


def configure_logging(level='INFO'):
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level.upper())


def export_docs(app, path):
    if not path:
        return
    write_openapi(app.config['OPENAPI_DOC'], path)
    logger.info('wrote API description to %s', path)


def main():
    cfg = Config.from_env()
    configure_logging(cfg.log_level)

    app = create_app(cfg)
    export_docs(app, cfg.docs_path)

    logger.info('listening on %s', cfg.bind_address)
    app.run(host=cfg.host, port=cfg.port, debug=cfg.debug, threaded=True)


if __name__ == '__main__':
    main()
