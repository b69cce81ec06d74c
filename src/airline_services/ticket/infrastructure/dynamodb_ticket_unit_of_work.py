import os

import boto3

from airline_services.shared.config import TicketSettings
from airline_services.ticket.domain.repository import TicketUnitOfWork

from .dynamodb_flight_repository import DynamoDBFlightRepository
from .dynamodb_reservation_repository import DynamoDBReservationRepository
from .dynamodb_sequence import DynamoDBSequence
from .dynamodb_transaction import DynamoDBTransaction


class DynamoDBTicketUnitOfWork(TicketUnitOfWork):
    """DynamoDB を使用した TicketUnitOfWork の具象実装"""

    def __init__(
        self,
        settings: TicketSettings,
        table_name: str | None = None,
        dynamodb=None,
    ) -> None:
        super().__init__()
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = dynamodb or boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)
        self._settings = settings

    def __enter__(self) -> "DynamoDBTicketUnitOfWork":
        self.transaction = DynamoDBTransaction(self.table, self._settings)
        self.flights = DynamoDBFlightRepository(self.table, self.transaction)
        self.reservations = DynamoDBReservationRepository(
            self.transaction, DynamoDBSequence(self.table)
        )
        super().__enter__()
        return self

    def _commit(self) -> None:
        self.transaction.commit()

    def rollback(self) -> None:
        self.transaction.rollback()
