import logging

from predict_combo.config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str | None = None):
    logging.basicConfig(level=(level or settings.log_level).upper(), format=LOG_FORMAT)
