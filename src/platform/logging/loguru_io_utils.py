from inspect import getfile, getsourcelines, signature
from os.path import basename
import re
from time import time
from typing import Any, Callable

from src.platform.logging.loguru_io_config import (
    DEPTH_LINE,
    MASK,
    MAX_CONTENT_LENGTH,
    SENSITIVE_KEYWORDS,
    call_depth_var,
    chain_start_time_var,
)


# `password='abc'`, `token: "abc"` and friends inside repr() output
_SENSITIVE_PATTERN = re.compile(
    r"""(\b(?:%s)\b)(\s*[=:]\s*)(['"]?)[^'",)\s]+\3"""
    % '|'.join(sorted(map(re.escape, SENSITIVE_KEYWORDS), key=len, reverse=True)),
    re.IGNORECASE,
)


def enter_call() -> float:
    """Push one level onto the call chain, returning when the outermost call began."""
    call_depth_var.set(call_depth_var.get() + 1)
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def exit_call() -> None:
    depth = max(call_depth_var.get() - 1, 0)
    call_depth_var.set(depth)
    if not depth:
        chain_start_time_var.set(0)


def depth_prefix() -> str:
    return DEPTH_LINE * max(call_depth_var.get() - 1, 0)


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    target = getattr(func, '__func__', func)
    try:
        lineno = getsourcelines(target)[1]
    except (OSError, TypeError):
        lineno = 0
    return f'{basename(getfile(target))}::{func.__qualname__}:{lineno}'


def drop_unknown_kwargs(func: Callable[..., Any], kwargs: dict[str, Any]) -> dict[str, Any]:
    """FastAPI may hand extra keyword arguments to a wrapped endpoint; keep only declared ones."""
    params = signature(getattr(func, '__wrapped__', func)).parameters
    if any(p.kind is p.VAR_KEYWORD for p in params.values()):
        return kwargs
    return {k: v for k, v in kwargs.items() if k in params}


def mask_sensitive(data: Any) -> Any:
    if data is None or isinstance(data, (bool, int, float)):
        return data
    data_str = str(data)
    masked = _SENSITIVE_PATTERN.sub(rf"\1\2'{MASK}'", data_str)
    return data if masked == data_str else masked


def should_mask_keyword(keyword: Any, value: Any) -> Any:
    if isinstance(keyword, str) and keyword.lower() in SENSITIVE_KEYWORDS:
        return MASK
    return value


def truncate_content(content: Any, max_length: int = MAX_CONTENT_LENGTH) -> Any:
    text = content if isinstance(content, str) else str(content)
    if len(text) <= max_length:
        return content
    return f'{text[:max_length]}... (truncated {len(text) - max_length} chars)'
