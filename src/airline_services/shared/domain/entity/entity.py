from abc import ABC
from typing import Generic, TypeVar

ID = TypeVar("ID")


class Entity(ABC, Generic[ID]):
    """Entity 基底クラス

    ID が未採番 (None) のエンティティは自分自身とのみ等しい。
    """

    def __init__(self, id: ID) -> None:
        self._id = id

    @property
    def id(self) -> ID:
        return self._id

    def _assign_id(self, id: ID) -> None:
        """永続化時に採番された ID を設定する"""
        if self._id is not None:
            raise ValueError(f"{type(self).__name__} already has an id: {self._id}")
        self._id = id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return False
        if self._id is None or other._id is None:
            return self is other
        return type(self) is type(other) and self._id == other._id

    def __hash__(self) -> int:
        if self._id is None:
            return id(self)
        return hash(self._id)
