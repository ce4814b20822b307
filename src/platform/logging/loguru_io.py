"""
`@Logger.io`: call tracing for use cases, repositories, adapters and endpoints.

At DEBUG every call logs its (masked) arguments and return value, indented by how deep
it sits in the current request's call chain. Exceptions are logged once, at the
innermost decorated frame: CustomBaseError without a traceback, anything else with one.
"""

from functools import wraps
from inspect import iscoroutinefunction
import types
from typing import TYPE_CHECKING, Any, Callable, ParamSpec, TypeVar, cast, overload


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io_config import ExtraField, custom_logger
from src.platform.logging.loguru_io_utils import (
    build_call_target_func_path,
    depth_prefix,
    drop_unknown_kwargs,
    enter_call,
    exit_call,
    mask_sensitive,
    should_mask_keyword,
    truncate_content,
)

_F = TypeVar('_F', bound=Callable[..., Any])


class LoguruIO:
    def __init__(
        self, custom_logger: 'LoguruLogger', *, reraise: bool = True, truncate_content: bool = False
    ) -> None:
        self._custom_logger = custom_logger
        self.reraise = reraise
        self.truncate_content = truncate_content
        self.call_target = ''

    def _bound(self, chain_start_time: float | str = '') -> 'LoguruLogger':
        # depth=2 points the record at whoever called the decorated function
        return self._custom_logger.bind(
            **{
                ExtraField.CALL_TARGET: self.call_target,
                ExtraField.CHAIN_START_TIME: chain_start_time,
            }
        ).opt(depth=2)

    def _enter(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> float:
        start_time = enter_call()
        if settings.DEBUG:  # masking is not free, skip it when nothing is logged
            self._bound(start_time).debug(
                f'{depth_prefix()}args: {self.mask_sensitive(args)}, '
                f'kwargs: {self.mask_sensitive(kwargs)}'
            )
        return start_time

    def _exit(self, start_time: float, return_value: Any) -> None:
        if settings.DEBUG:
            self._bound(start_time).debug(
                f'{depth_prefix()}return: {self.mask_sensitive(return_value)}'
            )

    def _fail(self, start_time: float, exc: Exception) -> None:
        if getattr(exc, '_has_logged', False):
            return
        exc._has_logged = True  # type: ignore[attr-defined]
        if isinstance(exc, CustomBaseError):
            self._bound(start_time).error(f'{type(exc).__name__}: {exc}')
        else:
            self._bound(start_time).exception(f'{type(exc).__name__}: {exc}')

    def _hide_from_traceback(self, func: Callable[..., Any]) -> Callable[..., Any]:
        func.__code__ = func.__code__.replace(  # type: ignore[attr-defined]
            co_filename=cast(types.FunctionType, self._custom_logger.catch).__code__.co_filename
        )
        return func

    def mask_sensitive(self, data: Any) -> Any:
        if isinstance(data, dict):
            processed: Any = {
                key: self.mask_sensitive(should_mask_keyword(key, value))
                for key, value in data.items()
            }
        elif isinstance(data, list | tuple):
            processed = type(data)(self.mask_sensitive(item) for item in data)
        else:
            processed = mask_sensitive(data)
        return truncate_content(processed) if self.truncate_content else processed

    def __call__(self, func: _F) -> _F:
        self.call_target = build_call_target_func_path(func)

        if iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                start_time = self._enter(args, kwargs)
                try:
                    return_value = await func(*args, **drop_unknown_kwargs(func, kwargs))
                except Exception as e:
                    self._fail(start_time, e)
                    if self.reraise:
                        raise
                    return None
                else:
                    self._exit(start_time, return_value)
                    return return_value
                finally:
                    exit_call()

            return cast(_F, self._hide_from_traceback(async_wrapper))

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            start_time = self._enter(args, kwargs)
            try:
                return_value = func(*args, **drop_unknown_kwargs(func, kwargs))
            except Exception as e:
                self._fail(start_time, e)
                if self.reraise:
                    raise
                return None
            else:
                self._exit(start_time, return_value)
                return return_value
            finally:
                exit_call()

        return cast(_F, self._hide_from_traceback(sync_wrapper))


_P = ParamSpec('_P')
_T = TypeVar('_T')


class Logger:
    base = custom_logger

    @overload
    @staticmethod
    def io(func: Callable[_P, _T]) -> Callable[_P, _T]: ...

    @overload
    @staticmethod
    def io(func: None = ..., *, reraise: bool = ..., truncate_content: bool = ...) -> LoguruIO: ...

    @staticmethod
    def io(
        func: Callable[_P, _T] | None = None, *, reraise: bool = True, truncate_content: bool = True
    ) -> Callable[_P, _T] | LoguruIO:
        decorator = LoguruIO(
            custom_logger=custom_logger, reraise=reraise, truncate_content=truncate_content
        )
        return decorator(func) if func else decorator
