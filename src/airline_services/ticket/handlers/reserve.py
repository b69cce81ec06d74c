from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.parser import event_parser
from aws_lambda_powertools.utilities.typing import LambdaContext

from airline_services.member.infrastructure import DynamoDBMemberRepository
from airline_services.shared.config import TicketSettings
from airline_services.shared.domain import (
    BusinessRuleViolationException,
    IntegrityFaultException,
    LockTimeoutException,
    ResourceNotFoundException,
)
from airline_services.ticket.applications import (
    RegisterReservationService,
    ReserveTicketService,
    ValidateReservationService,
)
from airline_services.ticket.domain.entity import Flight
from airline_services.ticket.domain.factory import (
    PassengerDetails,
    RepresentativeDetails,
    ReservationFactory,
)
from airline_services.ticket.domain.repository import FlightRepository
from airline_services.ticket.domain.service import FareCalculator, TicketSharedService
from airline_services.ticket.domain.value_object import FlightKey
from airline_services.ticket.handlers.request_models import (
    PassengerRequest,
    ReserveTicketRequest,
)
from airline_services.ticket.handlers.response_models import error_response, to_response
from airline_services.ticket.infrastructure import (
    DynamoDBFlightRepository,
    DynamoDBTicketUnitOfWork,
)

logger = Logger()

settings = TicketSettings()
shared_service = TicketSharedService(settings)
flight_repository = DynamoDBFlightRepository()
factory = ReservationFactory()
service = ReserveTicketService(
    fare_calculator=FareCalculator(settings, shared_service),
    validator=ValidateReservationService(settings, DynamoDBMemberRepository()),
    registrar=RegisterReservationService(
        uow_factory=lambda: DynamoDBTicketUnitOfWork(settings),
        shared_service=shared_service,
    ),
)


@logger.inject_lambda_context
@event_parser(model=ReserveTicketRequest)
def lambda_handler(event: ReserveTicketRequest, context: LambdaContext) -> dict:
    """チケット予約 Lambda ハンドラ

    フライトの妥当性確認 → 合計金額計算 → 業務ルール検証 → 予約登録 を行う。
    業務エラーはメッセージコードと詳細を含むエラーレスポンスとして返し、
    データ不整合はシステムエラーとして詳細を伏せて返す。
    """
    logger.info("Received reserve ticket request")

    try:
        flights = _resolve_flights(flight_repository, event)
        shared_service.validate_flight_selection(flights, event.flight_type)

        reservation = factory.create(
            flights=flights,
            representative=_to_representative_details(event),
            passengers=[_to_passenger_details(p) for p in event.passengers],
            reserve_date=shared_service.today(),
        )
        summary = service.reserve(reservation)
    except ResourceNotFoundException as e:
        return error_response("RESOURCE_NOT_FOUND", str(e))
    except BusinessRuleViolationException as e:
        logger.info("Reservation rejected", extra={"error_code": e.error_code})
        return error_response(e.error_code, str(e), e.details or None)
    except (IntegrityFaultException, LockTimeoutException):
        logger.exception("Failed to register reservation")
        return error_response("SYSTEM_ERROR", "A system error occurred")

    return to_response(summary)


def _resolve_flights(
    repository: FlightRepository, request: ReserveTicketRequest
) -> list[Flight]:
    """リクエストのフライト指定をフライトエンティティに解決する"""
    flights = []
    for selection in request.flights:
        key = FlightKey(
            departure_date=selection.departure_date,
            flight_name=selection.flight_name,
            boarding_class_cd=selection.boarding_class_cd,
            fare_type_cd=selection.fare_type_cd,
        )
        flight = repository.find_by_id(key)
        if flight is None:
            raise ResourceNotFoundException(f"Flight not found: {key}")
        flights.append(flight)
    return flights


def _to_representative_details(request: ReserveTicketRequest) -> RepresentativeDetails:
    representative = request.representative
    return {
        "family_name": representative.family_name,
        "given_name": representative.given_name,
        "gender": representative.gender.value,
        "age": representative.age,
        "tel": representative.tel,
        "mail": representative.mail,
        "membership_number": representative.membership_number,
    }


def _to_passenger_details(passenger: PassengerRequest) -> PassengerDetails:
    return {
        "family_name": passenger.family_name,
        "given_name": passenger.given_name,
        "gender": passenger.gender.value,
        "age": passenger.age,
        "membership_number": passenger.membership_number,
    }
