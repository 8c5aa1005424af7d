class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルール（集約の不変条件）に違反した場合"""

    pass


class ConflictException(DomainException):
    """現在の状態と競合する場合（再読込のうえ再試行できるかは派生クラス次第）"""

    pass


class DuplicateResourceException(ConflictException):
    """リソースの重複エラー（登録済みメール、既存メンバーへの招待など）"""

    pass


class OptimisticLockException(ConflictException):
    """楽観ロックの競合エラー（バージョンが期待値と異なる場合）"""

    pass


class AuthenticationException(DomainException):
    """認証失敗（メール不在とパスワード不一致を区別しない）"""

    pass
