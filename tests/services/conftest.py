"""Service test fixtures: explicit environment mappings for option builders.

Invariants:
    - Builders under test never read os.environ when these fixtures are passed
    - container_env carries the exact containerized CHROME_PATH
"""

import pytest

from shopping_agent.services.chrome_devtools_server import CONTAINER_CHROME_PATH


@pytest.fixture
def local_env():
    return {"PATH": "/usr/local/bin:/usr/bin", "HOME": "/home/dev"}


@pytest.fixture
def container_env(local_env):
    return {**local_env, "CHROME_PATH": CONTAINER_CHROME_PATH}
