"""
例外類別

backend 查詢失敗時拋出的例外不會被包裝，會原樣傳給呼叫端；
此處只定義本套件自身的錯誤。
"""


class TypoFinderError(Exception):
    """typofinder 所有自有例外的基底類別"""


class InvalidBackendError(TypoFinderError, TypeError):
    """傳入的物件不具備「檢查單一單詞」的拼字檢查能力"""

    DEFAULT_MESSAGE = (
        "A valid spell-checking backend instance is required: "
        "expected an object with a callable check_word(word) method"
    )

    def __init__(self, message: str = DEFAULT_MESSAGE, backend: object = None):
        super().__init__(message)
        self.backend = backend
