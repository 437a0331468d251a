import logging
import os
import sys

import pytest

# Ensure tests run with the project root on sys.path so `config` and `nbstats` import
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
	sys.path.insert(0, ROOT)


@pytest.fixture(autouse=True)
def _reset_root_logging():
	# the CLI installs a stderr handler bound to the captured stream of its test
	yield
	logging.basicConfig(handlers=[logging.NullHandler()], level=logging.WARNING, force=True)
