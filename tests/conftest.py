import json
from pathlib import Path

import pytest

from mcp_types.models.protocol import Implementation

SNAPSHOT_DIR = Path(__file__).parent / "integration" / "__snapshots__"


def pytest_addoption(parser):
    """Adds --update-snapshots flag to pytest."""
    parser.addoption(
        "--update-snapshots",
        action="store_true",
        default=False,
        help="Update snapshots.",
    )


@pytest.fixture(scope="session")
def snapshot_update(request):
    """Fixture to get the value of the --update-snapshots flag."""
    return request.config.getoption("--update-snapshots")


@pytest.fixture()
def wire_snapshot(snapshot_update):
    """Fixture comparing an encoded message with its stored JSON snapshot."""

    def check(name: str, payload: dict) -> None:
        path = SNAPSHOT_DIR / f"{name}.json"
        if snapshot_update:
            with open(path, "w") as f:
                json.dump(payload, f, indent=2)
        with open(path) as f:
            expected = json.load(f)
        # Compared as parsed JSON, so key order does not matter
        assert payload == expected

    return check


@pytest.fixture()
def client_info() -> Implementation:
    return Implementation(name="test-client", version="1.0.0")


@pytest.fixture()
def server_info() -> Implementation:
    return Implementation(name="test-server", version="0.1.0")
