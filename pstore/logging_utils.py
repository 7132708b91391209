import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Wire-level loggers that flood DEBUG output with request dumps
NOISY_LOGGERS = ("botocore", "boto3", "urllib3")


def setup_logging(debug: bool = False, stream: Optional[TextIO] = None):
    """
    Set up diagnostic logging for pstore.

    Logs go to stderr so they never mix with table, CSV or JSON output on
    stdout. Only warnings are shown unless debug is set.

    Args:
        debug: Log pstore's own DEBUG records
        stream: Log stream (default: standard error)
    """
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        stream=stream if stream is not None else sys.stderr,
    )
    logging.getLogger("pstore").setLevel(level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.INFO if debug else logging.WARNING)
