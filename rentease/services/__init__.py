from rentease.services.container import Services
from rentease.services.result import ResultStatus, ServiceResult

__all__ = ["Services", "ServiceResult", "ResultStatus"]
