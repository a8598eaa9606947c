class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """顧客・フライトが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルール（不変条件）に違反した場合"""

    pass


class CapacityExceededException(BusinessRuleViolationException):
    """フライトが満席の場合"""

    pass


class DuplicateResourceException(BusinessRuleViolationException):
    """リソースの重複エラー（同一フライトの二重予約、電話番号・メールの重複など）"""

    pass


class DuplicateFlightException(DuplicateResourceException):
    """便名・路線・出発日がすべて一致するフライトが既に存在する場合

    呼び出し側で確認を取った上で allow_duplicate=True を指定して再実行できる。
    """

    def __init__(self, message: str, existing_flight: object) -> None:
        super().__init__(message)
        self.existing_flight = existing_flight


class PersistenceFailureException(DomainException):
    """永続化に失敗した場合（メモリ上の変更はロールバック済み）"""

    pass


class OptimisticLockException(DomainException):
    """楽観ロックの競合エラー（保存済みスナップショットのバージョンが期待値と異なる場合）"""

    pass
