"""
Envelope responses
HTTP status mirrors the service result while the body always carries the envelope.
"""
from fastapi import status
from fastapi.responses import JSONResponse

from rentease.services.pagination import Page
from rentease.services.result import ResultStatus, ServiceResult

STATUS_CODES = {
    ResultStatus.OK: status.HTTP_200_OK,
    ResultStatus.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ResultStatus.INVALID: status.HTTP_400_BAD_REQUEST,
}


def envelope(result: ServiceResult, success_code: int = status.HTTP_200_OK) -> JSONResponse:
    code = success_code if result.success else STATUS_CODES[result.status]
    return JSONResponse(status_code=code, content=result.to_envelope())


def created(result: ServiceResult) -> JSONResponse:
    return envelope(result, status.HTTP_201_CREATED)


def paginated(page: Page) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_200_OK, content=page.to_envelope())
