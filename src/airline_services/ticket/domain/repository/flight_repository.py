from abc import abstractmethod

from airline_services.shared.domain import Repository
from airline_services.ticket.domain.entity import Flight
from airline_services.ticket.domain.value_object import FlightKey


class FlightRepository(Repository[Flight, FlightKey]):
    """フライト情報リポジトリのインターフェース"""

    @abstractmethod
    def find_by_id(self, key: FlightKey) -> Flight | None:
        """フライトキーで検索する（ロックは取得しない）"""
        raise NotImplementedError

    @abstractmethod
    def find_for_update(self, key: FlightKey) -> Flight | None:
        """排他ロックを取得した上でフライトを取得する

        ロックは所属する Unit of Work の commit / rollback まで保持される。
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, flight: Flight) -> int:
        """空席数を更新し、更新件数を返す"""
        raise NotImplementedError
