from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

ENV_SHAPE_POLICY = "CACHEMATRIX_SHAPE_POLICY"

SHAPE_POLICIES: tuple[str, ...] = ("raise", "warn")


def _normalize_policy(value: str) -> str:
    s = str(value).strip().lower()
    if s not in SHAPE_POLICIES:
        raise ValueError(f"shape policy must be one of {SHAPE_POLICIES}, got {value!r}")
    return s


class Settings:
    """Process-wide knobs for how cachematrix reports rejected input.

    ``shape_policy`` controls what ``CacheMatrix.set_matrix`` and
    ``make_cache_matrix`` do with a non-square matrix:

    - ``"raise"``: raise ``ShapeError``.
    - ``"warn"``: emit ``CacheMatrixShapeWarning`` and ignore the call.

    The initial value comes from ``CACHEMATRIX_SHAPE_POLICY``.
    """

    def __init__(self, *, env_var: str = ENV_SHAPE_POLICY) -> None:
        self._env_var = env_var
        self._shape_policy: str | None = None

    @property
    def shape_policy(self) -> str:
        if self._shape_policy is None:
            env = os.environ.get(self._env_var)
            self._shape_policy = _normalize_policy(env) if env else "raise"
        return self._shape_policy

    def set_shape_policy(self, value: str) -> str:
        prev = self.shape_policy
        self._shape_policy = _normalize_policy(value)
        return prev

    def reset(self) -> None:
        """Forget overrides; the next read consults the environment again."""
        self._shape_policy = None


_default_settings = Settings()


def get_settings() -> Settings:
    return _default_settings


def set_shape_policy(value: str) -> str:
    return _default_settings.set_shape_policy(value)


@contextmanager
def temporary_shape_policy(value: str) -> Iterator[None]:
    """Temporarily override the shape policy.

    The setting is process-global; this helper is not intended to provide
    thread isolation.
    """

    prev = _default_settings.set_shape_policy(value)
    try:
        yield
    finally:
        _default_settings.set_shape_policy(prev)
