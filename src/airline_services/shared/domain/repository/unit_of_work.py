from __future__ import annotations

import abc
from types import TracebackType


class AbstractUnitOfWork(abc.ABC):
    """Unit of Work 基底クラス

    with ブロック内で commit されなかった変更は、ブロックを抜ける際に
    すべて rollback される。
    """

    def __init__(self) -> None:
        self._committed = False

    def __enter__(self) -> AbstractUnitOfWork:
        self._committed = False
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if not self._committed:
            self.rollback()

    def commit(self) -> None:
        self._commit()
        self._committed = True

    @abc.abstractmethod
    def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def rollback(self) -> None:
        raise NotImplementedError
