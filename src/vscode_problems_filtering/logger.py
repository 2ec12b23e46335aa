import logging
import sys


logger = logging.getLogger("vscode_problems_filtering")
_handler = None


def setup_logger(log_level="WARNING"):
    # main() can run several times in one process, so reuse the handler and
    # point it at the current stderr instead of stacking a new one
    global _handler
    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        _handler.setFormatter(formatter)
        logger.addHandler(_handler)
    else:
        _handler.setStream(sys.stderr)
    if log_level:
        logger.setLevel(log_level)
        _handler.setLevel(log_level)
    return logger
