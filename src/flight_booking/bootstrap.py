"""アプリケーションの組み立て（リポジトリ・時計・ユースケースの配線）"""

import os
from dataclasses import dataclass
from functools import cache

from flight_booking.booking.applications import (
    AddCustomerService,
    AddFlightService,
    CancelBookingService,
    CreateBookingService,
    DeleteCustomerService,
    DeleteFlightService,
    RebookBookingService,
    UnitOfWork,
)
from flight_booking.booking.domain.entity import BookingSystem
from flight_booking.booking.domain.repository import BookingSystemRepository
from flight_booking.booking.infrastructure import (
    DynamoDBBookingSystemRepository,
    FileBookingSystemRepository,
)
from flight_booking.shared.domain import Clock, SystemClock
from flight_booking.shared.utils import get_logger

logger = get_logger()


@dataclass(frozen=True)
class BookingApplication:
    """1 つの UnitOfWork（＝1 つのロック）を共有するユースケース一式"""

    unit_of_work: UnitOfWork
    add_flight: AddFlightService
    add_customer: AddCustomerService
    delete_customer: DeleteCustomerService
    create_booking: CreateBookingService
    cancel_booking: CancelBookingService
    rebook_booking: RebookBookingService
    delete_flight: DeleteFlightService

    @property
    def system(self) -> BookingSystem:
        return self.unit_of_work.system


def build_application(
    repository: BookingSystemRepository, clock: Clock | None = None
) -> BookingApplication:
    """保存済みの予約システムを読み込み（なければ空で作成し）ユースケースを組み立てる"""
    clock = clock or SystemClock()
    system = repository.load()
    if system is None:
        logger.info("No stored booking system found, starting empty")
        system = BookingSystem()

    uow = UnitOfWork(system, repository)
    return BookingApplication(
        unit_of_work=uow,
        add_flight=AddFlightService(uow, clock),
        add_customer=AddCustomerService(uow),
        delete_customer=DeleteCustomerService(uow),
        create_booking=CreateBookingService(uow, clock),
        cancel_booking=CancelBookingService(uow, clock),
        rebook_booking=RebookBookingService(uow, clock),
        delete_flight=DeleteFlightService(uow, clock),
    )


@cache
def default_repository() -> BookingSystemRepository:
    """TABLE_NAME があれば DynamoDB、なければ JSON ファイルに保存する"""
    if os.getenv("TABLE_NAME"):
        return DynamoDBBookingSystemRepository()
    return FileBookingSystemRepository()


def load_application() -> BookingApplication:
    """呼び出しごとに最新のスナップショットから組み立てる"""
    return build_application(default_repository())
