"""Domain errors raised by the store and services.

Each error carries the HTTP status it maps to; the handlers in ``app.main``
turn them into ``{"error": message}`` responses.
"""


class ShopError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(ShopError):
    pass


class InvalidInput(ShopError):
    pass


class EmptyCart(ShopError):
    pass


class InvalidDiscountCode(ShopError):
    pass


class DiscountAlreadyUsed(ShopError):
    pass
