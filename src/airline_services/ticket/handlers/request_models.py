from datetime import date

from pydantic import BaseModel, Field

from airline_services.member.domain import Gender
from airline_services.ticket.domain.enum import BoardingClassCd, FareTypeCd, FlightType


class FlightSelectionRequest(BaseModel):
    """予約するフライトのリクエストモデル"""

    departure_date: date = Field(..., description="搭乗日（YYYY-MM-DD形式）")
    flight_name: str = Field(..., min_length=1, max_length=10, examples=["ATR001"])
    boarding_class_cd: BoardingClassCd
    fare_type_cd: FareTypeCd


class RepresentativeRequest(BaseModel):
    """予約代表者のリクエストモデル"""

    family_name: str = Field(..., min_length=1, max_length=10, description="カナ姓")
    given_name: str = Field(..., min_length=1, max_length=10, description="カナ名")
    gender: Gender
    age: int = Field(..., ge=0, le=150)
    tel: str = Field(default="", max_length=20)
    mail: str = Field(default="", max_length=256)
    membership_number: str | None = Field(default=None, pattern=r"^(\d{10})?$")


class PassengerRequest(BaseModel):
    """搭乗者のリクエストモデル"""

    family_name: str = Field(..., min_length=1, max_length=10, description="カナ姓")
    given_name: str = Field(..., min_length=1, max_length=10, description="カナ名")
    gender: Gender
    age: int = Field(..., ge=0, le=150)
    membership_number: str | None = Field(default=None, pattern=r"^(\d{10})?$")


class ReserveTicketRequest(BaseModel):
    """チケット予約リクエストモデル

    flights は往路・復路の順に指定する。件数は flight_type と一致しなければならない。
    """

    flight_type: FlightType
    flights: list[FlightSelectionRequest] = Field(..., min_length=1, max_length=2)
    representative: RepresentativeRequest
    passengers: list[PassengerRequest] = Field(..., min_length=1, max_length=6)
