from airline_services.shared.domain import BusinessRuleViolationException


class RepresentativeMemberNotFoundException(BusinessRuleViolationException):
    """予約代表者の会員番号に該当する会員が存在しない"""

    error_code = "e.ar.b2.2002"

    def __init__(self) -> None:
        super().__init__("Representative member not found")


class RepresentativeIdentityMismatchException(BusinessRuleViolationException):
    """予約代表者の情報が会員情報と一致しない"""

    error_code = "e.ar.b2.2003"

    def __init__(self) -> None:
        super().__init__("Representative does not match the member information")


class RepresentativeTooYoungException(BusinessRuleViolationException):
    """予約代表者の年齢が最小年齢未満"""

    error_code = "e.ar.b2.2004"

    def __init__(self, min_age: int) -> None:
        super().__init__(
            f"Representative must be at least {min_age} years old", min_age=min_age
        )
        self.min_age = min_age


class PassengerMemberNotFoundException(BusinessRuleViolationException):
    """搭乗者の会員番号に該当する会員が存在しない"""

    error_code = "e.ar.b2.2005"

    def __init__(self, position: int) -> None:
        super().__init__(f"Member of passenger {position} not found", position=position)
        self.position = position


class PassengerIdentityMismatchException(BusinessRuleViolationException):
    """搭乗者の情報が会員情報と一致しない"""

    error_code = "e.ar.b2.2006"

    def __init__(self, position: int) -> None:
        super().__init__(
            f"Passenger {position} does not match the member information",
            position=position,
        )
        self.position = position


class LadiesDiscountGenderViolationException(BusinessRuleViolationException):
    """レディース割に男性の搭乗者が含まれる"""

    error_code = "e.ar.b2.2007"

    def __init__(self) -> None:
        super().__init__("Ladies discount is available to female passengers only")


class FareTypeNotAvailableException(BusinessRuleViolationException):
    """搭乗日が運賃種別の予約可能期間外"""

    error_code = "e.ar.b2.2008"

    def __init__(self, fare_type_name: str) -> None:
        super().__init__(
            f"Fare type {fare_type_name} is not available for the departure date",
            fare_type_name=fare_type_name,
        )
        self.fare_type_name = fare_type_name


class InsufficientSeatsException(BusinessRuleViolationException):
    """空席数が搭乗者数未満"""

    error_code = "e.ar.b2.2009"

    def __init__(self, flight: str, vacant_num: int, requested: int) -> None:
        super().__init__(
            f"Not enough vacant seats on {flight}: "
            f"vacant {vacant_num}, requested {requested}",
            flight=flight,
            vacant_num=vacant_num,
            requested=requested,
        )
        self.vacant_num = vacant_num
        self.requested = requested


class GroupDiscountMinimumNotMetException(BusinessRuleViolationException):
    """グループ割の搭乗者数が利用可能最少人数未満"""

    error_code = "e.ar.b2.2010"

    def __init__(self, fare_type_name: str, passenger_min_num: int) -> None:
        super().__init__(
            f"{fare_type_name} requires at least {passenger_min_num} passengers",
            fare_type_name=fare_type_name,
            passenger_min_num=passenger_min_num,
        )
        self.fare_type_name = fare_type_name
        self.passenger_min_num = passenger_min_num


class FlightTypeMismatchException(BusinessRuleViolationException):
    """選択フライト数がフライト種別と一致しない"""

    error_code = "e.ar.b1.5001"

    def __init__(self, flight_type: str, expected: int, actual: int) -> None:
        super().__init__(
            f"Flight type {flight_type} requires {expected} flights, got {actual}",
            flight_type=flight_type,
            expected=expected,
            actual=actual,
        )


class OutOfReservablePeriodException(BusinessRuleViolationException):
    """搭乗日が予約可能期間外"""

    error_code = "e.ar.b1.5002"

    def __init__(self, limit_day: int) -> None:
        super().__init__(
            f"Departure date must be within {limit_day} days from today",
            limit_day=limit_day,
        )


class ReturnFlightTooEarlyException(BusinessRuleViolationException):
    """復路の出発が往路の到着から必要な間隔を空けていない"""

    error_code = "e.ar.b1.5003"

    def __init__(self, interval_minutes: int) -> None:
        super().__init__(
            f"Return flight must depart at least {interval_minutes} minutes "
            "after the outbound arrival",
            interval_minutes=interval_minutes,
        )
