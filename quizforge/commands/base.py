"""
명령 경계.

서비스 계층의 예외를 CommandResult로 변환한다. ErrorKind는 여기까지 그대로
유지되고, 사람이 읽을 메시지만 문자열로 바뀐다.
"""
import functools
import logging
from typing import Any, Awaitable, Callable, TypeVar

from pydantic import BaseModel, ValidationError

from quizforge.core.storage import StorageHandle
from quizforge.exceptions import BaseAppError, ErrorKind, MalformedPayloadError

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class CommandResult(BaseModel):
    """명령 결과: data 또는 (error, error_kind) 중 하나"""
    data: Any = None
    error: str | None = None
    error_kind: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_payload(schema: type[SchemaT], payload: Any) -> SchemaT:
    """camelCase/snake_case 매핑 → 요청 스키마"""
    if isinstance(payload, schema):
        return payload
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc']) or '(root)'}: {error['msg']}"
            for error in e.errors()
        )
        raise MalformedPayloadError(f"요청 데이터 형식이 올바르지 않습니다: {details}") from e


def to_json(value: Any) -> Any:
    """응답 모델 → JSON 호환 값 (camelCase 키)"""
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, mode="json")
    if isinstance(value, list):
        return [to_json(item) for item in value]
    return value


def command(func: Callable[..., Awaitable[Any]]) -> Callable[..., Awaitable[CommandResult]]:
    """서비스 호출을 감싸 예외를 CommandResult로 변환"""

    @functools.wraps(func)
    async def wrapper(storage: StorageHandle, *args, **kwargs) -> CommandResult:
        try:
            result = await func(storage, *args, **kwargs)
        except BaseAppError as e:
            logger.warning(f"Application error: {e.__class__.__name__} - {e.message}, command={func.__name__}")
            return CommandResult(error=e.message, error_kind=e.kind)
        except Exception as e:
            logger.error(f"Unhandled exception: {e.__class__.__name__}, command={func.__name__}", exc_info=True)
            # 프로덕션 환경에서는 상세 에러 메시지 숨김
            if storage.settings.environment == "production":
                message = "내부 오류가 발생했습니다."
            else:
                message = f"{e.__class__.__name__}: {e}"
            return CommandResult(error=message, error_kind=ErrorKind.STORAGE_UNAVAILABLE)
        return CommandResult(data=to_json(result))

    return wrapper
