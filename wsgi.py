"""Web Server Gateway Interface entry-point."""

from tokenauth.service import config
from tokenauth.service.app_logging import setup_logger
from tokenauth.service.factory import create_app

setup_logger(config.LOGLEVEL, json=config.LOG_JSON == '1')
application = create_app()
