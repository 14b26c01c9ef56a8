"""Client gateway for the Fitbit activity API."""

from fitbit_gateway.clients import (
    ActivityGateway,
    ActivityLogEntry,
    EndpointGateway,
    HttpRequestExecutor,
    RequestExecutor,
)
from fitbit_gateway.exceptions import InvalidArgumentError

__version__ = "0.1.0"

__all__ = [
    'ActivityGateway',
    'ActivityLogEntry',
    'EndpointGateway',
    'HttpRequestExecutor',
    'RequestExecutor',
    'InvalidArgumentError',
]
