import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from router_status.config import ProviderContext
from router_status.dependencies.api import get_current_client
from router_status.dependencies.compute import get_compute_client_factory, get_provider_context
from router_status.main import app

NETWORK = "https://www.googleapis.com/compute/v1/projects/proj-1/global/networks/default"


class FakeCompute:
    """Stands in for the googleapiclient Compute service.

    Set ``response`` to the JSON returned by ``getRouterStatus`` or ``error``
    to an exception raised by ``execute()``.  Every call is recorded.  Calling
    the fake with a provider context returns itself, so it also serves as the
    client factory.
    """

    def __init__(self) -> None:
        self.response: dict = {"kind": "compute#routerStatusResponse", "result": {}}
        self.error = None
        self.calls: list[dict] = []
        self.contexts: list = []

    def __call__(self, context):
        self.contexts.append(context)
        return self

    def routers(self):
        return self

    def getRouterStatus(self, project, region, router):
        self.calls.append({"project": project, "region": region, "router": router})
        return self

    def execute(self):
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture()
def router_status_response():
    return {
        "kind": "compute#routerStatusResponse",
        "result": {
            "network": NETWORK,
            "bestRoutes": [
                {
                    "kind": "compute#route",
                    "destRange": "10.0.0.0/8",
                    "name": "r1",
                    "network": NETWORK,
                    "priority": 100,
                    "tags": [],
                    "nextHopIp": "169.254.0.2",
                },
            ],
            "bestRoutesForRouter": [],
        },
    }


@pytest.fixture()
def fake_compute(router_status_response):
    compute = FakeCompute()
    compute.response = router_status_response
    return compute


@pytest.fixture()
def provider_context():
    return ProviderContext(project="proj-1", region="us-central1")


@pytest.fixture()
def client(fake_compute, provider_context):
    app.dependency_overrides[get_current_client] = lambda: "test-client"
    app.dependency_overrides[get_provider_context] = lambda: provider_context
    app.dependency_overrides[get_compute_client_factory] = lambda: fake_compute
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
