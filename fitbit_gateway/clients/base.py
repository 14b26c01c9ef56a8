"""Base interfaces shared by the endpoint gateways."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

HTTP_METHODS = ('GET', 'POST', 'DELETE')


class RequestExecutor(ABC):
    """Performs an authenticated API call and returns the parsed response."""

    @abstractmethod
    def execute(
        self,
        resource_path: str,
        method: str = 'GET',
        parameters: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Send ``method`` to ``resource_path`` and return the parsed body."""
        pass


class EndpointGateway:
    """Common state for gateways: the executor and the user they act for."""

    def __init__(self, executor: RequestExecutor, user_id: str = '-'):
        self.executor = executor
        self.user_id = str(user_id)

    def make_api_request(
        self,
        resource_path: str,
        method: str = 'GET',
        parameters: Optional[Dict[str, Any]] = None,
    ) -> Any:
        return self.executor.execute(resource_path, method, parameters)
