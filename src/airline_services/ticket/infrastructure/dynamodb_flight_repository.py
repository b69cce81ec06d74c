import os
from datetime import date, time

import boto3

from airline_services.ticket.domain.entity import Flight
from airline_services.ticket.domain.enum import BoardingClassCd, FareTypeCd
from airline_services.ticket.domain.repository import FlightRepository
from airline_services.ticket.domain.value_object import (
    BoardingClass,
    FareType,
    FlightKey,
    FlightMaster,
    Route,
)

from .dynamodb_transaction import DynamoDBTransaction


def flight_item_key(key: FlightKey) -> dict:
    return {
        "PK": f"FLIGHT#{key.departure_date.isoformat()}#{key.flight_name}",
        "SK": f"CLASS#{key.boarding_class_cd.value}#FARE#{key.fare_type_cd.value}",
    }


class DynamoDBFlightRepository(FlightRepository):
    """DynamoDBを使用したFlightRepository の具象実装

    find_for_update / update は DynamoDBTransaction に参加している場合のみ利用できる。
    """

    def __init__(self, table=None, transaction: DynamoDBTransaction | None = None) -> None:
        self.table = table or boto3.resource("dynamodb").Table(os.getenv("TABLE_NAME"))
        self._transaction = transaction

    def find_by_id(self, key: FlightKey) -> Flight | None:
        """フライトキーで検索"""
        response = self.table.get_item(Key=flight_item_key(key), ConsistentRead=True)
        item = response.get("Item")
        if item is None:
            return None
        return self._to_entity(item)

    def find_for_update(self, key: FlightKey) -> Flight | None:
        """排他ロックを取得してフライトを取得"""
        item = self._require_transaction().acquire_lock(flight_item_key(key))
        if item is None:
            return None
        return self._to_entity(item)

    def update(self, flight: Flight) -> int:
        """空席数の更新をトランザクションに追加し、ロックの解放も同時に行う"""
        transaction = self._require_transaction()
        transaction.stage(
            "Update",
            {
                "Key": flight_item_key(flight.key),
                "UpdateExpression": (
                    "SET vacant_num = :vacant_num REMOVE lock_owner, lock_expires_at"
                ),
                "ConditionExpression": "lock_owner = :owner",
                "ExpressionAttributeValues": {
                    ":vacant_num": flight.vacant_num,
                    ":owner": transaction.owner,
                },
            },
        )
        return 1

    def _require_transaction(self) -> DynamoDBTransaction:
        if self._transaction is None:
            raise RuntimeError("Flight updates require a unit of work")
        return self._transaction

    def _to_entity(self, item: dict) -> Flight:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Flight(
            departure_date=date.fromisoformat(item["departure_date"]),
            flight_master=FlightMaster(
                flight_name=item["flight_name"],
                route=Route(
                    departure_airport_cd=item["departure_airport_cd"],
                    arrival_airport_cd=item["arrival_airport_cd"],
                    basic_fare=int(item["basic_fare"]),
                ),
                departure_time=time.fromisoformat(item["departure_time"]),
                arrival_time=time.fromisoformat(item["arrival_time"]),
            ),
            boarding_class=BoardingClass(
                boarding_class_cd=BoardingClassCd(item["boarding_class_cd"]),
                boarding_class_name=item["boarding_class_name"],
                extra_charge=int(item["extra_charge"]),
            ),
            fare_type=FareType(
                fare_type_cd=FareTypeCd(item["fare_type_cd"]),
                fare_type_name=item["fare_type_name"],
                discount_rate=int(item["discount_rate"]),
                passenger_min_num=int(item["passenger_min_num"]),
                rsv_available_start_day_num=int(item["rsv_available_start_day_num"]),
                rsv_available_end_day_num=int(item["rsv_available_end_day_num"]),
            ),
            vacant_num=int(item["vacant_num"]),
        )
