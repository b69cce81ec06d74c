from .boarding_class_cd import BoardingClassCd as BoardingClassCd
from .fare_type_cd import FareTypeCd as FareTypeCd
from .flight_type import FlightType as FlightType
