import logging


logger = logging.getLogger("uriescape")
logger.addHandler(logging.NullHandler())
