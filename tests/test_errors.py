"""errorsモジュールのテスト。"""

import pytest

from pytoolkit_optional.errors import AbsentValueError


class TestAbsentValueError:
    """AbsentValueErrorクラスのテストクラス。"""

    def test_without_message(self) -> None:
        """メッセージなしで作成できる。"""
        error = AbsentValueError()

        assert error.message is None
        assert str(error) == ""

    def test_with_message(self) -> None:
        """メッセージを指定して作成できる。"""
        error = AbsentValueError("値が存在しません")

        assert error.message == "値が存在しません"
        assert str(error) == "値が存在しません"

    def test_is_distinguishable(self) -> None:
        """他の標準例外とは区別できる。"""
        assert issubclass(AbsentValueError, Exception)
        assert not issubclass(AbsentValueError, ValueError)

        with pytest.raises(AbsentValueError, match="空です"):
            raise AbsentValueError("空です")
