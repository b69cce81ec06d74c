from typing import Any, ClassVar


class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合

    利用者に提示するメッセージを組み立てられるよう、
    メッセージコードと構造化された詳細情報を保持する。
    """

    error_code: ClassVar[str] = "e.ar.b0.0000"

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.details: dict[str, Any] = details


class LockTimeoutException(DomainException):
    """排他ロックを制限時間内に取得できなかった場合"""

    pass


class IntegrityFaultException(Exception):
    """更新・登録件数が期待値と異なる場合のシステム例外

    データ不整合や更新の消失を示すため、業務エラーとしては扱わない。
    """

    def __init__(self, operation: str, expected: int, actual: int) -> None:
        super().__init__(
            f"Unexpected affected row count on {operation}: "
            f"expected {expected}, actual {actual}"
        )
        self.operation = operation
        self.expected = expected
        self.actual = actual
