from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from airline_services.ticket.applications import TicketReserveSummary


class ReservationData(BaseModel):
    """予約完了データのレスポンスモデル"""

    reserve_no: str
    payment_deadline: str
    total_fare_amount: str
    total_fare_currency: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: ReservationData


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: dict[str, Any] | None = None


def to_response(summary: TicketReserveSummary) -> dict:
    """予約完了情報をレスポンス辞書に変換する"""
    return SuccessResponse(
        data=ReservationData(
            reserve_no=str(summary.reserve_no),
            payment_deadline=summary.payment_deadline.isoformat(),
            total_fare_amount=str(summary.total_fare.amount),
            total_fare_currency=str(summary.total_fare.currency),
        )
    ).model_dump()


def error_response(
    error_code: str, message: str, details: dict[str, Any] | None = None
) -> dict:
    """エラーレスポンスを生成"""
    return ErrorResponse(
        error_code=error_code,
        message=message,
        details=details,
    ).model_dump(exclude_none=True)
