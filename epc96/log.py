"""
Logging setup
"""

import logging
import sys
# Global
general_debug_enabled = False
installed_handlers = []

def set_general_debug(debug=False):
    global general_debug_enabled
    general_debug_enabled = debug

def is_general_debug_enabled():
    return general_debug_enabled

def init_logging(debug=False, logfile=None):
    """Initialize logging for the epc96 command line.

    Calling it again replaces the handlers installed by the previous call.
    """
    set_general_debug(debug)

    loglevel = logging.DEBUG if debug else logging.INFO
    logformat = '%(asctime)s %(name)s: %(levelname)s: %(message)s'
    formatter = logging.Formatter(logformat)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stderr_handler = logging.StreamHandler(sys.stderr)
    stdout_handler.setFormatter(formatter)
    stderr_handler.setFormatter(formatter)
    # below WARNING goes to stdout, the rest to stderr
    stdout_handler.addFilter(MaxLevelFilter(logging.WARNING))
    stdout_handler.setLevel(loglevel)
    stderr_handler.setLevel(max(loglevel, logging.WARNING))
    handlers = [stderr_handler, stdout_handler]

    if logfile:
        fhandler = logging.FileHandler(logfile)
        fhandler.setFormatter(formatter)
        handlers.append(fhandler)

    root = logging.getLogger()
    for handler in installed_handlers:
        root.removeHandler(handler)
        handler.close()
    del installed_handlers[:]

    root.setLevel(loglevel)
    for handler in handlers:
        root.addHandler(handler)
        installed_handlers.append(handler)

def debugfast(self, *args, **kwargs):
    """logging debug func that is a no-op unless general debug is enabled.

    Encode and parse calls can run in tight loops over whole tag
    populations, so the trace calls inside the codecs skip even the
    isEnabledFor check when debugging is off.
    """
    if general_debug_enabled:
        self.debug(*args, **kwargs)

def get_logger(module_name):
    """Return a logger object providing the custom debugfast function.

    Inject an epc96 specific debugfast function inside the current
    LoggerClass.
    """
    logger_cls = logging.getLoggerClass()
    logger_cls.debugfast = debugfast
    logger = logging.getLogger(module_name)
    return logger


class MaxLevelFilter(logging.Filter):
    '''Filters (lets through) all messages with level < LEVEL'''
    def __init__(self, level):
        super(MaxLevelFilter, self).__init__()
        self.level = level

    def filter(self, record):
        # "<" because logger.setLevel is inclusive
        return record.levelno < self.level
