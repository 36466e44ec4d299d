"""서비스 결과 컨테이너 — 검증 실패를 예외 대신 값으로 반환.

Service result container — Returns validation failures as values instead of
raising. A Result either carries a payload (success) or a non-empty ordered
list of (message, type) pairs (failure); success is derived from whether any
message has been recorded.

Usage:
    result: Result[Pantry] = Result()
    result.add_error_message("Quantity cannot be zero or negative", ResultType.INVALID)
    if result.success:
        ...
"""

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, Field, PrivateAttr

T = TypeVar("T")


class ResultType(str, Enum):
    """결과 메시지 종류 (Kind of a result message)."""

    SUCCESS = "SUCCESS"
    INVALID = "INVALID"
    NOT_FOUND = "NOT_FOUND"


class ResultMessage(BaseModel):
    """단일 검증 메시지 (A single validation message and its kind)."""

    model_config = {"frozen": True}

    message: str
    type: ResultType


class Result(BaseModel, Generic[T]):
    """성공/실패와 페이로드, 검증 메시지를 묶는 결과 값.

    Outcome of a mutating service call. The payload is usually an ORM
    entity, so it is kept as a private attribute outside validation.

    Invariants:
        - success는 messages가 비어 있을 때만 True
          (success is True exactly when no message was recorded)
        - payload는 성공한 결과에만 설정 가능
          (payload can only be set on a successful result)

    Attributes:
        messages: 기록된 검증 메시지 목록, 기록 순서 유지
                  (Recorded validation messages, in insertion order)
    """

    messages: list[ResultMessage] = Field(default_factory=list)
    _payload: T | None = PrivateAttr(default=None)

    @property
    def success(self) -> bool:
        return not self.messages

    @property
    def payload(self) -> T | None:
        return self._payload

    @payload.setter
    def payload(self, value: T) -> None:
        if not self.success:
            raise ValueError("Cannot attach a payload to a failed result")
        self._payload = value

    def add_error_message(self, message: str, result_type: ResultType = ResultType.INVALID) -> None:
        """검증 메시지를 추가합니다. 기존 페이로드는 제거됩니다.

        Record a failure message. Any previously attached payload is dropped
        so a failed result never exposes one.
        """
        self.messages.append(ResultMessage(message=message, type=result_type))
        self._payload = None

    @property
    def error_messages(self) -> list[str]:
        """메시지 텍스트만 추출 (Message texts only, in order)."""
        return [m.message for m in self.messages]
