"""Resultado tipado das chamadas ao servico de calendario remoto."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from utils.errors import UpstreamRequestError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class UpstreamError:
    """Falha do upstream ja reduzida a status HTTP e mensagem legivel."""

    status_code: int
    message: str


@dataclass(frozen=True)
class UpstreamResult(Generic[T]):
    """Sucesso (`value`) ou falha (`error`) de uma unica chamada ao upstream."""

    value: T | None = None
    error: UpstreamError | None = None

    @classmethod
    def success(cls, value: T) -> UpstreamResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: UpstreamError) -> UpstreamResult[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Retorna o valor ou levanta UpstreamRequestError com o erro mapeado."""
        if self.error is not None:
            raise UpstreamRequestError(self.error)
        return self.value  # type: ignore[return-value]


__all__ = ["UpstreamError", "UpstreamResult"]
