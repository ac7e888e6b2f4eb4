"""
papertrail_logger.py

Logging setup for the contact export scripts: messages always go to stdout,
and also to Papertrail when a log destination is given. Adapted from
http://help.papertrailapp.com/kb/configuration/configuring-centralized-logging-from-python-apps/
"""

import logging
from logging.handlers import SysLogHandler
import sys

LOGGER_NAME = "fb_cosy_contacts"

PAPERTRAIL_LOG_FORMAT = '%(asctime)s %(hostname)s %(jobname)s: [%(levelname)s] %(message)s'
PAPERTRAIL_DATE_FORMAT = '%b %d %H:%M:%S'
LOCAL_LOG_FORMAT = '%(message)s'

FB_LOCAL_HOSTNAME = 'fb-contacts-local'


class PapertrailContextFilter(logging.Filter):

    def __init__(self, hostname, jobname, *args, **kwargs):
        # To conform to log coloration on PT, which splits by whitespace
        self.hostname = hostname.replace(' ', '')
        self.jobname = jobname.replace(' ', '')
        super().__init__(*args, **kwargs)

    def filter(self, record):
        record.hostname = self.hostname
        record.jobname = self.jobname
        return True


def parse_destination(destination):
    """Split a 'host:port' string into an (address, port) tuple."""
    address, _, port = destination.rpartition(':')
    if not address or not port.isdigit():
        raise ValueError(
            "Log destination must look like HOST:PORT, got '{}'".format(destination)
        )
    return address, int(port)


def get_logger(jobname, destination=None, hostname=FB_LOCAL_HOSTNAME,
               level=logging.INFO):
    """
    Creates the `LOGGER_NAME` logger with the `PapertrailContextFilter` and a
    stdout handler. Calling it again replaces the handlers set up before.

    Positional arguments:

    * jobname:     job name to display in the Papertrail log stream

    Available keyword arguments:

    * destination: (address, port) of a PT log destination; if None, logs
                   only go to stdout
    * hostname:    hostname to display in the Papertrail log stream. Also
                   becomes a 'system' in PT within the particular destination
    * level:       level of the stdout handler
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG) # allow all by default
    logger.propagate = False
    close_logger(logger)
    for old_filter in list(logger.filters):
        logger.removeFilter(old_filter)

    pt_filter = PapertrailContextFilter(hostname, jobname)
    logger.addFilter(pt_filter)

    local_handler = logging.StreamHandler(sys.stdout)
    local_handler.setLevel(level)
    local_handler.setFormatter(logging.Formatter(LOCAL_LOG_FORMAT))
    logger.addHandler(local_handler)

    if destination is not None:
        syslog = SysLogHandler(address=destination)
        formatter = logging.Formatter(
            PAPERTRAIL_LOG_FORMAT, datefmt=PAPERTRAIL_DATE_FORMAT
        )
        syslog.setFormatter(formatter)
        logger.addHandler(syslog)

    return logger


def close_logger(logger):
    """Close and detach every handler on `logger`."""
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
