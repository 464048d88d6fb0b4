# tests/conftest.py
import asyncio
import os
import tempfile

import pytest

from factories import drain_pending

# Keep the app's rotating log file out of the working tree
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="stayplanner-logs-"))


@pytest.fixture
def asyncio_event_loop():
    loop = asyncio.new_event_loop()
    try:
        yield loop
    finally:
        drain_pending(loop)
        loop.close()
