from .boarding_class import BoardingClass as BoardingClass
from .fare_type import FareType as FareType
from .flight_key import FlightKey as FlightKey
from .flight_master import FlightMaster as FlightMaster
from .peak_time import PeakTime as PeakTime
from .representative import Representative as Representative
from .reserve_no import ReserveNo as ReserveNo
from .route import Route as Route
