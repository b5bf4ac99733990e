# produto_api/utils/logging.py
import logging
import sys

from produto_api.utils.settings import LOG_LEVEL

_ROOT = "produto_api"
_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _configure_root() -> logging.Logger:
    root = logging.getLogger(_ROOT)

    #nie dokladaj handlerow przy kolejnych importach (np. testy)
    if root.handlers:
        return root

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    root.addHandler(handler)
    root.setLevel(LOG_LEVEL)
    root.propagate = False
    return root


def get_logger(name: str) -> logging.Logger:
    _configure_root()
    if not name.startswith(_ROOT):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
