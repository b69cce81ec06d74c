from .enum import BoardingClassCd as BoardingClassCd
from .enum import FareTypeCd as FareTypeCd
from .enum import FlightType as FlightType
from .value_object import BoardingClass as BoardingClass
from .value_object import FareType as FareType
from .value_object import FlightKey as FlightKey
from .value_object import FlightMaster as FlightMaster
from .value_object import PeakTime as PeakTime
from .value_object import Representative as Representative
from .value_object import ReserveNo as ReserveNo
from .value_object import Route as Route
from .entity import Flight as Flight
from .entity import Passenger as Passenger
from .entity import Reservation as Reservation
from .entity import ReserveFlight as ReserveFlight
from .factory import ReservationFactory as ReservationFactory
from .repository import FlightRepository as FlightRepository
from .repository import ReservationRepository as ReservationRepository
from .repository import TicketUnitOfWork as TicketUnitOfWork
from .service import FareCalculator as FareCalculator
from .service import TicketSharedService as TicketSharedService
