# geom3d/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер библиотеки.
# ---------------------------------------------------------------

import logging


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("geom3d")


logger = init_logger()
