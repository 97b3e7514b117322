import logging

import pytest

from epc96 import log


@pytest.fixture(autouse=True)
def reset_epc96_logging():
    """Drop handlers left behind by init_logging (the CLI calls it)."""
    yield
    logging.getLogger('epc96').setLevel(logging.NOTSET)
    root = logging.getLogger()
    for handler in list(log.installed_handlers):
        root.removeHandler(handler)
        handler.close()
    del log.installed_handlers[:]
    log.set_general_debug(False)
