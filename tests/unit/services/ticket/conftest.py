import itertools
import threading
from collections import defaultdict
from collections.abc import Callable

import pytest

from airline_services.shared.domain import LockTimeoutException
from airline_services.ticket.applications import RegisterReservationService
from airline_services.ticket.domain.entity import (
    Flight,
    Passenger,
    Reservation,
    ReserveFlight,
)
from airline_services.ticket.domain.repository import (
    FlightRepository,
    ReservationRepository,
    TicketUnitOfWork,
)
from airline_services.ticket.domain.value_object import FlightKey, ReserveNo


class InMemoryTicketStore:
    """フライトごとの行ロックを持つインメモリのデータストア

    affected_rows に操作名と件数を設定すると、その操作の登録・更新件数を差し替える。
    """

    def __init__(self) -> None:
        self.vacant_nums: dict[FlightKey, int] = {}
        self.reservations: dict[ReserveNo, Reservation] = {}
        self.reserve_flights: dict[int, ReserveFlight] = {}
        self.passengers: dict[int, Passenger] = {}
        self.affected_rows: dict[str, int] = {}
        self.lock_timeout = 2.0
        self._flights: dict[FlightKey, Flight] = {}
        self._row_locks: dict[FlightKey, threading.Lock] = defaultdict(threading.Lock)
        self._sequences: dict[str, itertools.count] = defaultdict(lambda: itertools.count(1))
        self._guard = threading.Lock()

    def add_flight(self, flight: Flight) -> None:
        self._flights[flight.key] = flight
        self.vacant_nums[flight.key] = flight.vacant_num

    def load_flight(self, key: FlightKey) -> Flight | None:
        template = self._flights.get(key)
        if template is None:
            return None
        return Flight(
            departure_date=template.departure_date,
            flight_master=template.flight_master,
            boarding_class=template.boarding_class,
            fare_type=template.fare_type,
            vacant_num=self.vacant_nums[key],
        )

    def row_lock(self, key: FlightKey) -> threading.Lock:
        with self._guard:
            return self._row_locks[key]

    def next_value(self, name: str) -> int:
        with self._guard:
            return next(self._sequences[name])

    def apply(self, changes: list[Callable[[], None]]) -> None:
        with self._guard:
            for change in changes:
                change()


class InMemoryFlightRepository(FlightRepository):
    def __init__(self, store: InMemoryTicketStore, uow: "InMemoryTicketUnitOfWork") -> None:
        self._store = store
        self._uow = uow

    def find_by_id(self, key: FlightKey) -> Flight | None:
        return self._store.load_flight(key)

    def find_for_update(self, key: FlightKey) -> Flight | None:
        lock = self._store.row_lock(key)
        if not lock.acquire(timeout=self._store.lock_timeout):
            raise LockTimeoutException(f"Could not lock flight: {key}")
        self._uow.held_locks.append(lock)
        return self._store.load_flight(key)

    def update(self, flight: Flight) -> int:
        key, vacant_num = flight.key, flight.vacant_num
        self._uow.changes.append(lambda: self._store.vacant_nums.__setitem__(key, vacant_num))
        return self._store.affected_rows.get("update_flight", 1)


class InMemoryReservationRepository(ReservationRepository):
    def __init__(self, store: InMemoryTicketStore, uow: "InMemoryTicketUnitOfWork") -> None:
        self._store = store
        self._uow = uow

    def insert(self, reservation: Reservation) -> int:
        reservation.assign_reserve_no(
            ReserveNo.from_sequence(self._store.next_value("RESERVE_NO"))
        )
        self._uow.changes.append(
            lambda: self._store.reservations.__setitem__(reservation.reserve_no, reservation)
        )
        return self._store.affected_rows.get("insert_reservation", 1)

    def insert_reserve_flight(self, reserve_flight: ReserveFlight) -> int:
        reserve_flight.assign_reserve_flight_no(self._store.next_value("RESERVE_FLIGHT_NO"))
        self._uow.changes.append(
            lambda: self._store.reserve_flights.__setitem__(
                reserve_flight.reserve_flight_no, reserve_flight
            )
        )
        return self._store.affected_rows.get("insert_reserve_flight", 1)

    def insert_passenger(self, passenger: Passenger) -> int:
        passenger.assign_passenger_no(self._store.next_value("PASSENGER_NO"))
        self._uow.changes.append(
            lambda: self._store.passengers.__setitem__(passenger.passenger_no, passenger)
        )
        return self._store.affected_rows.get("insert_passenger", 1)


class InMemoryTicketUnitOfWork(TicketUnitOfWork):
    def __init__(self, store: InMemoryTicketStore) -> None:
        super().__init__()
        self._store = store
        self.changes: list[Callable[[], None]] = []
        self.held_locks: list[threading.Lock] = []
        self.flights = InMemoryFlightRepository(store, self)
        self.reservations = InMemoryReservationRepository(store, self)

    def _commit(self) -> None:
        self._store.apply(self.changes)
        self.changes = []
        self._release_locks()

    def rollback(self) -> None:
        self.changes = []
        self._release_locks()

    def _release_locks(self) -> None:
        locks, self.held_locks = self.held_locks, []
        for lock in locks:
            lock.release()


@pytest.fixture
def store():
    return InMemoryTicketStore()


@pytest.fixture
def registrar(store, shared_service):
    """インメモリストアを使う予約登録サービス"""
    return RegisterReservationService(
        uow_factory=lambda: InMemoryTicketUnitOfWork(store),
        shared_service=shared_service,
    )
