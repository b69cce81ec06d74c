class DynamoDBSequence:
    """アトミックカウンタによる採番

    RDB のシーケンスと同様にトランザクション外で採番するため、
    ロールバック時は欠番が生じる。
    """

    def __init__(self, table) -> None:
        self.table = table

    def next_value(self, name: str) -> int:
        response = self.table.update_item(
            Key={"PK": f"SEQUENCE#{name}", "SK": "SEQUENCE"},
            UpdateExpression="ADD current_value :increment",
            ExpressionAttributeValues={":increment": 1},
            ReturnValues="UPDATED_NEW",
        )
        return int(response["Attributes"]["current_value"])
