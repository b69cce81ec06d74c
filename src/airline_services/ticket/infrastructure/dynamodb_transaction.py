import time
import uuid
from collections.abc import Callable
from decimal import Decimal

from botocore.exceptions import ClientError

from airline_services.shared.config import TicketSettings
from airline_services.shared.domain import IntegrityFaultException, LockTimeoutException
from airline_services.shared.utils import get_logger

logger = get_logger("ticket")


def _to_epoch(value: float) -> Decimal:
    return Decimal(str(round(value, 3)))


class DynamoDBTransaction:
    """DynamoDB 上の行ロックと TransactWriteItems による書き込みの束

    - acquire_lock: アイテムに lock_owner を条件付きで書き込み排他ロックとする
      （select for update 相当）。取得できるまで制限時間内で再試行する。
    - stage: 書き込みを溜め、commit で1トランザクションとして反映する。
    - rollback: 溜めた書き込みを破棄し、保持しているロックを解放する。
    """

    def __init__(
        self,
        table,
        settings: TicketSettings,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.table = table
        self.owner = uuid.uuid4().hex
        self._settings = settings
        self._clock = clock
        self._sleep = sleep
        self._transact_items: list[dict] = []
        self._locked_keys: list[dict] = []

    @property
    def staged_items(self) -> list[dict]:
        return list(self._transact_items)

    def acquire_lock(self, key: dict) -> dict | None:
        """ロックを取得してアイテムを返す（存在しない場合は None）"""
        deadline = self._clock() + self._settings.lock_timeout_seconds
        while True:
            now = self._clock()
            try:
                response = self.table.update_item(
                    Key=key,
                    UpdateExpression="SET lock_owner = :owner, lock_expires_at = :expires_at",
                    ConditionExpression=(
                        "attribute_exists(PK) AND "
                        "(attribute_not_exists(lock_owner) OR lock_expires_at < :now)"
                    ),
                    ExpressionAttributeValues={
                        ":owner": self.owner,
                        ":expires_at": _to_epoch(now + self._settings.lock_lease_seconds),
                        ":now": _to_epoch(now),
                    },
                    ReturnValues="ALL_NEW",
                )
            except ClientError as e:
                if e.response["Error"]["Code"] != "ConditionalCheckFailedException":
                    raise
                if not self._exists(key):
                    return None
                if self._clock() >= deadline:
                    raise LockTimeoutException(f"Could not lock item: {key}") from e
                logger.debug("Waiting for row lock", extra={"key": key})
                self._sleep(self._settings.lock_retry_interval_seconds)
                continue

            self._locked_keys.append(key)
            return response["Attributes"]

    def stage(self, operation: str, request: dict) -> None:
        """TransactWriteItems の1要素（Put / Update）を追加する"""
        self._transact_items.append(
            {operation: {"TableName": self.table.name, **request}}
        )

    def commit(self) -> None:
        items = self._transact_items
        if items:
            try:
                self.table.meta.client.transact_write_items(TransactItems=items)
            except ClientError as e:
                if e.response["Error"]["Code"] != "TransactionCanceledException":
                    raise
                reasons = e.response.get("CancellationReasons", [])
                failed = sum(1 for reason in reasons if reason.get("Code", "None") != "None")
                logger.error(
                    "Transaction cancelled",
                    extra={"owner": self.owner, "reasons": reasons},
                )
                raise IntegrityFaultException(
                    "commit transaction", expected=len(items), actual=len(items) - failed
                ) from e

        # 空席数の更新がロック属性を削除するため、ここで解放済みとなる
        self._transact_items = []
        self._locked_keys = []

    def rollback(self) -> None:
        self._transact_items = []
        locked_keys, self._locked_keys = self._locked_keys, []
        for key in locked_keys:
            self._release(key)

    def _release(self, key: dict) -> None:
        try:
            self.table.update_item(
                Key=key,
                UpdateExpression="REMOVE lock_owner, lock_expires_at",
                ConditionExpression="lock_owner = :owner",
                ExpressionAttributeValues={":owner": self.owner},
            )
        except ClientError as e:
            if e.response["Error"]["Code"] != "ConditionalCheckFailedException":
                raise
            # 期限切れ後に他のトランザクションが取得済み
            logger.warning("Row lock already released", extra={"key": key})

    def _exists(self, key: dict) -> bool:
        response = self.table.get_item(
            Key=key, ConsistentRead=True, ProjectionExpression="PK"
        )
        return "Item" in response
