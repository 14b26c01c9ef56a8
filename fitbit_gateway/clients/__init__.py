from fitbit_gateway.clients.base import EndpointGateway, RequestExecutor
from fitbit_gateway.clients.executor import HttpRequestExecutor
from fitbit_gateway.clients.activity import ActivityGateway, ActivityLogEntry

__all__ = [
    'EndpointGateway',
    'RequestExecutor',
    'HttpRequestExecutor',
    'ActivityGateway',
    'ActivityLogEntry',
]
