from abc import ABC, abstractmethod

from airline_services.ticket.domain.entity import Passenger, Reservation, ReserveFlight


class ReservationRepository(ABC):
    """予約情報リポジトリのインターフェース

    各 insert は採番した ID を引数のエンティティに設定し、登録件数を返す。
    """

    @abstractmethod
    def insert(self, reservation: Reservation) -> int:
        """予約を登録する（予約番号を採番）"""
        raise NotImplementedError

    @abstractmethod
    def insert_reserve_flight(self, reserve_flight: ReserveFlight) -> int:
        """予約フライトを登録する（予約フライト番号を採番）"""
        raise NotImplementedError

    @abstractmethod
    def insert_passenger(self, passenger: Passenger) -> int:
        """搭乗者を登録する（搭乗者番号を採番）"""
        raise NotImplementedError
