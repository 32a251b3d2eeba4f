class AbsentValueError(Exception):
    """空のOptionalから値を取り出そうとした場合に送出される例外。"""

    def __init__(self, message: str | None = None):
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        self.message = message
