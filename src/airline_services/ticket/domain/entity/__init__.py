from .flight import Flight as Flight
from .passenger import Passenger as Passenger
from .reservation import Reservation as Reservation
from .reserve_flight import ReserveFlight as ReserveFlight
