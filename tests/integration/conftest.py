"""Fixtures for integration tests against the Pub/Sub emulator."""

import subprocess
import time

import httpx
import pytest

from courier.config import ClientConfig
from courier.pubsub import PubSub

EMULATOR_PORT = 8686  # Non-default port to avoid conflicts
EMULATOR_PROJECT = "courier-it"


@pytest.fixture(scope="session")
def emulator_container():
    """Start the Pub/Sub emulator Docker container for the test session."""
    container_name = "courier-pubsub-emulator-test"

    # Clean up any existing container
    subprocess.run(["docker", "rm", "-f", container_name], capture_output=True)

    subprocess.run(
        [
            "docker",
            "run",
            "-d",
            "--name",
            container_name,
            "-p",
            f"{EMULATOR_PORT}:8085",
            "gcr.io/google.com/cloudsdktool/google-cloud-cli:emulators",
            "gcloud",
            "beta",
            "emulators",
            "pubsub",
            "start",
            "--host-port=0.0.0.0:8085",
            f"--project={EMULATOR_PROJECT}",
        ],
        check=True,
        capture_output=True,
    )

    # Wait for the emulator to answer HTTP
    deadline = time.monotonic() + 60
    while time.monotonic() < deadline:
        try:
            httpx.get(f"http://localhost:{EMULATOR_PORT}/", timeout=1.0)
            break
        except httpx.TransportError:
            time.sleep(1)

    yield

    subprocess.run(["docker", "stop", container_name], capture_output=True)
    subprocess.run(["docker", "rm", container_name], capture_output=True)


@pytest.fixture(scope="session")
def emulator_config(emulator_container) -> ClientConfig:
    return ClientConfig(
        project_id=EMULATOR_PROJECT,
        api_endpoint=f"http://localhost:{EMULATOR_PORT}",
        timeout_seconds=10.0,
    )


@pytest.fixture
def pubsub(emulator_config) -> PubSub:
    """Provide a client on a clean project; everything is deleted afterwards."""
    client = PubSub.from_config(emulator_config)
    client.delete_all_subscriptions()
    client.delete_all_topics()

    yield client

    client.delete_all_subscriptions()
    client.delete_all_topics()
    client.close()
