import os
from datetime import date

import boto3

from airline_services.member.domain.entity import Member
from airline_services.member.domain.enum import Gender
from airline_services.member.domain.repository import MemberRepository
from airline_services.member.domain.value_object import MembershipNumber


class DynamoDBMemberRepository(MemberRepository):
    """DynamoDBを使用したMemberRepository の具象実装"""

    def __init__(self, table_name: str | None = None, dynamodb=None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = dynamodb or boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def find_by_id(self, membership_number: MembershipNumber) -> Member | None:
        """会員番号で検索"""
        response = self.table.get_item(
            Key={"PK": f"MEMBER#{membership_number}", "SK": "PROFILE"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if item is None:
            return None
        return self._to_entity(item)

    def _to_entity(self, item: dict) -> Member:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        birthday = item.get("birthday")
        return Member(
            id=MembershipNumber(item["membership_number"]),
            family_name=item["family_name"],
            given_name=item["given_name"],
            kana_family_name=item["kana_family_name"],
            kana_given_name=item["kana_given_name"],
            gender=Gender(item["gender"]),
            birthday=date.fromisoformat(birthday) if birthday else None,
            tel=item.get("tel"),
            mail=item.get("mail"),
        )
