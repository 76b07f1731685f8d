import logging

logger = logging.getLogger("twotouch")
