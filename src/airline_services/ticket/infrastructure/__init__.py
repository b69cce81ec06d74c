from .dynamodb_flight_repository import (
    DynamoDBFlightRepository as DynamoDBFlightRepository,
)
from .dynamodb_flight_repository import flight_item_key as flight_item_key
from .dynamodb_reservation_repository import (
    DynamoDBReservationRepository as DynamoDBReservationRepository,
)
from .dynamodb_sequence import DynamoDBSequence as DynamoDBSequence
from .dynamodb_ticket_unit_of_work import (
    DynamoDBTicketUnitOfWork as DynamoDBTicketUnitOfWork,
)
from .dynamodb_transaction import DynamoDBTransaction as DynamoDBTransaction
