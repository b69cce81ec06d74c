from .reservation_factory import PassengerDetails as PassengerDetails
from .reservation_factory import RepresentativeDetails as RepresentativeDetails
from .reservation_factory import ReservationFactory as ReservationFactory
