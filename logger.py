# logger.py
import logging
import sys

LOG_FILE = "/var/log/dgraph_helper.log"
FALLBACK_LOG_FILE = "/tmp/dgraph_helper.log"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s %(module)s:%(lineno)d: %(message)s"


def _file_handler() -> logging.Handler:
    # /var/log is only writable for root; preflight runs after import
    for path in (LOG_FILE, FALLBACK_LOG_FILE):
        try:
            return logging.FileHandler(path)
        except OSError:
            continue
    # no writable log file: the console handler still reports warnings
    return logging.NullHandler()


def setup_logger(name: str = "dgraph_helper") -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG)
    fmt = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S")

    fh = _file_handler()
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(fmt)

    # installer output shares the terminal, so only problems go to stderr
    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(logging.WARNING)
    sh.setFormatter(fmt)

    logger.addHandler(fh)
    logger.addHandler(sh)
    return logger

log = setup_logger()
