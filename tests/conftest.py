import pytest
from fastapi.testclient import TestClient

from leavedesk.app import create_app
from leavedesk.dispatch import Dispatcher
from leavedesk.registry import ParameterDescriptor, ParamType, ToolDescriptor, build_registry
from leavedesk.tools import build_default_registry


@pytest.fixture
def registry():
    return build_default_registry()


@pytest.fixture
def dispatcher(registry):
    return Dispatcher(registry)


@pytest.fixture
def client(registry):
    return TestClient(create_app(registry))


def _explode(message: str) -> str:
    raise RuntimeError("boom")


def _typed(count: int, ratio: float, flag: bool, label: str) -> dict:
    return {"count": count, "ratio": ratio, "flag": flag, "label": label}


@pytest.fixture
def scratch_registry():
    """Registry with a faulting tool and one parameter of every type."""
    return build_registry([
        (
            ToolDescriptor(
                name="Explode",
                description="Always raises.",
                parameters=(ParameterDescriptor("message", ParamType.STRING),),
            ),
            _explode,
        ),
        (
            ToolDescriptor(
                name="Typed",
                description="Echoes its coerced arguments.",
                parameters=(
                    ParameterDescriptor("count", ParamType.INTEGER),
                    ParameterDescriptor("ratio", ParamType.FLOAT),
                    ParameterDescriptor("flag", ParamType.BOOLEAN),
                    ParameterDescriptor("label", ParamType.STRING),
                ),
            ),
            _typed,
        ),
    ])
