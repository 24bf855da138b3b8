import logging

LOG_FORMAT = '[%(levelname)s] %(name)s: %(message)s'


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
