from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Repository 基底クラス

    - モデル全体の永続化を抽象化する
    - save は全件成功か全件失敗のどちらか（部分書き込みは起こさない）
    """

    @abstractmethod
    def save(self, aggregate: T) -> None:
        """モデル全体を永続化する"""
        raise NotImplementedError

    @abstractmethod
    def load(self) -> T | None:
        """保存済みのモデルを読み込む（未保存なら None）"""
        raise NotImplementedError
