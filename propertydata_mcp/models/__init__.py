from .results import ApiResult, Failure, Success

__all__ = ["ApiResult", "Failure", "Success"]
