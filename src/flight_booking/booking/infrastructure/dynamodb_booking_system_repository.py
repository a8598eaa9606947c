import os

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from flight_booking.booking.domain.entity import BookingSystem
from flight_booking.booking.domain.repository import BookingSystemRepository
from flight_booking.booking.infrastructure.snapshot import BookingSystemSnapshot
from flight_booking.shared.domain.exception import OptimisticLockException

PARTITION_KEY = "BOOKING_SYSTEM"
SORT_KEY = "SNAPSHOT"


class DynamoDBBookingSystemRepository(BookingSystemRepository):
    """DynamoDB を使用した BookingSystemRepository の具象実装

    予約システム全体を 1 アイテム（PK=BOOKING_SYSTEM, SK=SNAPSHOT）として保存する。
    version 属性で楽観ロックを行い、読み込んだ時点から更新されていれば保存を拒否する。
    """

    def __init__(self, table_name: str | None = None, table=None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self._table = table
        self._version = 0

    @property
    def table(self):
        if self._table is None:
            self._table = boto3.resource("dynamodb").Table(self.table_name)
        return self._table

    @property
    def version(self) -> int:
        return self._version

    def save(self, system: BookingSystem) -> None:
        """スナップショットを条件付きで書き込む"""
        next_version = self._version + 1
        item = {
            "PK": PARTITION_KEY,
            "SK": SORT_KEY,
            "entity_type": "BOOKING_SYSTEM",
            "version": next_version,
            "payload": BookingSystemSnapshot.from_domain(system).model_dump_json(),
        }
        if self._version == 0:
            condition = Attr("PK").not_exists()
        else:
            condition = Attr("version").eq(self._version)

        try:
            self.table.put_item(Item=item, ConditionExpression=condition)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise OptimisticLockException(
                    f"Booking system snapshot conflict: expected version {self._version}"
                ) from e
            raise
        self._version = next_version

    def load(self) -> BookingSystem | None:
        response = self.table.get_item(
            Key={"PK": PARTITION_KEY, "SK": SORT_KEY},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            self._version = 0
            return None

        self._version = int(item["version"])
        return BookingSystemSnapshot.model_validate_json(item["payload"]).to_domain()
