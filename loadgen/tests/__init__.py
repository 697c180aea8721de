"""Test package for loadgen unit tests."""

import logging

logging.getLogger("asyncio").setLevel(logging.ERROR)
