"""계정 서비스 — 회원가입 검증, 계정 조회, 인증 조회 비즈니스 로직.

Account Service — Registration validation, account lookup, and the
authentication lookup that decides whether an account may log in.
"""

from typing import Sequence

from app.config import settings
from app.models.user import AppRole, AppUser
from app.repositories.app_user_repository import AppUserRepository
from app.services.result import Result, ResultType
from app.utils.exceptions import DuplicateKeyError, NotFoundError
from app.utils.password import PasswordEncoder

USERNAME_MAX_LENGTH: int = 50
PASSWORD_MIN_LENGTH: int = 8


def is_valid_password(password: str) -> bool:
    """비밀번호 강도 정책을 검사합니다.

    Check the password strength policy: at least 8 characters, with at least
    one digit, one letter, and one character that is neither.

    Args:
        password: 평문 비밀번호 (Plain text password)

    Returns:
        bool: 정책 충족 여부 (Whether the policy is satisfied)
    """
    if len(password) < PASSWORD_MIN_LENGTH:
        return False

    digits: int = 0
    letters: int = 0
    others: int = 0
    for c in password:
        if c.isdigit():
            digits += 1
        elif c.isalpha():
            letters += 1
        else:
            others += 1

    return digits > 0 and letters > 0 and others > 0


class AppUserService:
    """계정 관련 비즈니스 로직을 처리하는 서비스.

    Service handling account business logic.

    Args:
        repository: 계정 레포지토리 (Account repository)
        encoder: 비밀번호 인코더 (One-way password encoder)
    """

    def __init__(self, repository: AppUserRepository, encoder: PasswordEncoder) -> None:
        self.repository = repository
        self.encoder = encoder

    async def find_all(self) -> Sequence[AppUser]:
        return await self.repository.find_all()

    async def find_by_user_id(self, app_user_id: int) -> AppUser | None:
        return await self.repository.find_by_user_id(app_user_id)

    async def authentication_lookup(self, username: str) -> AppUser:
        """인증에 사용할 계정을 조회합니다.

        Return the account for ``username`` if it exists and is enabled.
        This is the single place that decides whether an account is usable
        for authentication.

        Raises:
            NotFoundError: 계정이 없거나 비활성일 때 (Missing or disabled account)
        """
        app_user: AppUser | None = await self.repository.find_by_username(username)

        if app_user is None or not app_user.enabled:
            raise NotFoundError(f"{username} not found")

        return app_user

    async def create(self, username: str | None, password: str | None) -> Result[AppUser]:
        """새 계정을 생성합니다.

        Validate and create an enabled account with the default role.

        Args:
            username: 로그인 아이디 (Login name, must contain "@")
            password: 평문 비밀번호 (Plain text password, hashed before storage)

        Returns:
            Result[AppUser]: 성공 시 ID가 할당된 계정, 실패 시 검증 메시지
                             (Persisted account on success, messages otherwise)
        """
        result: Result[AppUser] = self._validate(username, password)
        if not result.success:
            return result

        app_user: AppUser = AppUser(
            username=username,
            password_hash=self.encoder.encode(password),
            enabled=True,
            roles=[AppRole(name=settings.DEFAULT_ROLE)],
        )

        # 중복 확인은 저장소의 고유 제약에 맡김 — uniqueness is enforced by storage
        try:
            result.payload = await self.repository.create(app_user)
        except DuplicateKeyError:
            result.add_error_message("The provided username already exists", ResultType.INVALID)

        return result

    def _validate(self, username: str | None, password: str | None) -> Result[AppUser]:
        result: Result[AppUser] = Result()
        if username is None or not username.strip():
            result.add_error_message("Username is required.", ResultType.INVALID)
            return result

        if password is None:
            result.add_error_message("Password is required.", ResultType.INVALID)
            return result

        if "@" not in username:
            result.add_error_message("Username must contain an @ symbol.", ResultType.INVALID)

        if len(username) > USERNAME_MAX_LENGTH:
            result.add_error_message("Username must be less than 50 characters.", ResultType.INVALID)

        if not is_valid_password(password):
            result.add_error_message(
                "Password must be at least 8 character and contain a digit,"
                " a letter, and a non-digit/non-letter.",
                ResultType.INVALID,
            )

        return result
