"""
存在しない可能性のある値を扱うためのモジュール。

Noneを直接受け渡す代わりに、値の有無の確認、デフォルト値の補完、
値が存在する場合のみの処理（同期・非同期）を統一的なAPIで提供する。
"""

from typing import Any, Awaitable, Callable, Generic, TypeVar

from .errors import AbsentValueError

T = TypeVar("T")


class Optional(Generic[T]):
    """
    値を一つだけ保持し、その値が存在するかどうかを表すクラス。

    Noneのみを「値が存在しない」とみなす。0、空文字列、Falseなどは存在する値として扱う。

    Examples:
        >>> Optional.of(None).or_else(5).get()
        5
        >>> Optional.of(6).is_present_and(lambda x: x > 5)
        True
    """

    def __init__(self, value: T | None):
        self._value = value

    @classmethod
    def of(cls, value: T | None) -> "Optional[T]":
        """
        Optionalを作成する。

        コンストラクタと同じ動作をするが、こちらの利用を推奨する。

        Args:
            value: 保持する値（Noneの場合は空のOptionalになる）
        """
        return cls(value)

    @classmethod
    def empty(cls) -> "Optional[T]":
        """空のOptionalを作成する。"""
        return cls(None)

    def is_present(self) -> bool:
        return self._value is not None

    def is_empty(self) -> bool:
        return not self.is_present()

    def get(self) -> T:
        """
        保持している値を返す。

        Raises:
            AbsentValueError: 値が存在しない場合
        """
        if self._value is None:
            raise AbsentValueError()
        return self._value

    def or_else(self, value: T | None) -> "Optional[T]":
        """
        値が存在しない場合、代わりの値を設定する。

        新しいOptionalは作成せず、このインスタンス自身を書き換えて返す。
        値が既に存在する場合は何もしない。

        Args:
            value: 代わりの値
        """
        if self.is_empty():
            self._value = value
        return self

    def if_present(self, func: Callable[[T], Any]) -> None:
        if self._value is not None:
            func(self._value)

    async def if_present_async(self, func: Callable[[T], Awaitable[Any]]) -> None:
        """値が存在する場合のみ、非同期関数を実行して完了を待つ。"""
        if self._value is not None:
            await func(self._value)

    def is_present_and(self, predicate: Callable[[T], bool]) -> bool:
        """値が存在し、かつpredicateを満たす場合にTrueを返す。"""
        if self._value is None:
            return False
        return bool(predicate(self._value))

    def __repr__(self) -> str:
        if self._value is None:
            return f"{type(self).__name__}.empty()"
        return f"{type(self).__name__}({self._value!r})"
