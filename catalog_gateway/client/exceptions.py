"""
Backend API client exceptions
"""
from typing import Optional


class BackendError(Exception):
    """Базовое исключение клиента бэкенда."""

    status_code: int = 502
    code: str = "BACKEND_ERROR"

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class BackendResponseError(BackendError):
    """Бэкенд ответил статусом вне 2xx."""

    code = "BACKEND_RESPONSE_ERROR"


class BackendUnavailableError(BackendError):
    """Бэкенд недоступен (сетевая ошибка или таймаут)."""

    code = "BACKEND_UNAVAILABLE"
