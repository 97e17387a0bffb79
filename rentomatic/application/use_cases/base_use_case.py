"""
Base use case

Every use case goes through the same steps: reject invalid requests,
run the operation, and turn whatever happens into a response. ``execute``
never raises; faults come back as ``ResponseFailure``.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Union

from rentomatic.application.requests.request import InvalidRequest, ValidRequest
from rentomatic.application.responses import (
    Response,
    ResponseFailure,
    ResponseSuccess,
)
from rentomatic.domain.exceptions import ResourceNotFoundError
from rentomatic.infrastructure.logging.logging_config import PerformanceLogger


class UseCase(ABC):
    """Template for use cases returning a ``Response``"""

    def __init__(self):
        self._logger = logging.getLogger(self.__class__.__name__)

    def execute(self, request: Union[ValidRequest, InvalidRequest]) -> Response:
        """Run the use case for a request and always return a response"""
        if not isinstance(request, (ValidRequest, InvalidRequest)):
            self._logger.warning(
                "Rejected %s passed in place of a request", type(request).__name__
            )
            return ResponseFailure.build_parameters_error(
                f"request: Is not a request ({type(request).__name__})"
            )

        if not request.is_valid():
            self._logger.info(
                "Rejected invalid request with %d error(s)", len(request.errors)
            )
            return ResponseFailure.build_from_invalid_request(request)

        try:
            with PerformanceLogger(self.__class__.__name__, self._logger):
                result = self.process_request(request)
        except ResourceNotFoundError as e:
            self._logger.warning("Resource not found: %s", e)
            return ResponseFailure.build_resource_error(e.message)
        except Exception as e:  # pylint: disable=broad-exception-caught
            self._logger.error(
                "Use case failed with %s: %s", e.__class__.__name__, e
            )
            return ResponseFailure.build_system_error(e)

        if isinstance(result, (ResponseSuccess, ResponseFailure)):
            return result
        return ResponseSuccess(result)

    @abstractmethod
    def process_request(self, request: ValidRequest) -> Any:
        """Perform the operation for a valid request"""
