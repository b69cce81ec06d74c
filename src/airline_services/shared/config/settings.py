from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TicketSettings(BaseSettings):
    """チケット予約の業務設定

    起動時に一度だけ読み込み、各サービスのコンストラクタへ渡す。
    環境変数 (TICKET_ プレフィックス) で上書きできる。
    """

    model_config = SettingsConfigDict(
        env_prefix="TICKET_",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    # 大人運賃が適用される最小年齢
    adult_passenger_min_age: int = Field(default=12, ge=0)
    # 大人運賃に対する小児運賃の比率(%)
    child_fare_rate: int = Field(default=50, ge=0, le=100)
    # 予約代表者に必要な最小年齢
    representative_min_age: int = Field(default=18, ge=0)
    # 本日から何日先の搭乗日まで予約できるか
    limit_day: int = Field(default=355, ge=0)
    # 往路到着から復路出発までに必要な間隔(分)
    reserve_interval_time: int = Field(default=20, ge=0)

    lock_timeout_seconds: float = Field(default=5.0, gt=0)
    lock_retry_interval_seconds: float = Field(default=0.05, gt=0)
    # ロック保持者が異常終了した場合に、ロックが自動的に失効するまでの秒数
    lock_lease_seconds: float = Field(default=30.0, gt=0)
