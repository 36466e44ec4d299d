"""커스텀 예외 클래스 모듈.

Custom exception classes module.
Provides pre-configured HTTPException subclasses for common error patterns,
plus the storage-level DuplicateKeyError raised by repositories when an
insert violates a uniqueness constraint.

Usage:
    from app.utils.exceptions import NotFoundError, DuplicateKeyError
    raise NotFoundError("alice@example.com not found")
"""

from typing import Any

from fastapi import HTTPException, status


class DuplicateKeyError(Exception):
    """고유 제약 위반 — 레포지토리가 중복 키 삽입 시 발생.

    Raised by a repository when an insert violates a unique constraint
    (e.g. an existing username). Services translate it into a Result message
    instead of letting it propagate.
    """


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when a requested resource does not exist, and by the
    authentication lookup when an account is missing or disabled.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class UnauthorizedError(HTTPException):
    """401 Unauthorized 예외 — 인증 실패 시 사용.

    401 Unauthorized exception.
    Raised when authentication is missing, invalid, or expired.

    Args:
        detail: 오류 메시지 (Error message, default: "Authentication required")
    """

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: Any = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class ValidationFailedError(BadRequestError):
    """실패한 Result를 400 응답으로 변환하는 예외.

    400 exception carrying the ordered validation messages of a failed Result,
    rendered as [{"message": ..., "type": ...}, ...].

    Args:
        messages: (메시지, 종류) 목록 (Ordered list of ResultMessage)
    """

    def __init__(self, messages: list[Any]) -> None:
        super().__init__(
            detail=[{"message": m.message, "type": m.type.value} for m in messages]
        )
