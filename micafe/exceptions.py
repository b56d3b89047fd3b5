# micafe/exceptions.py


class CafeError(Exception):
    """Base class for errors reported back to the caller."""

    message = "Request failed"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)
        self.message = message or self.message


# Validation rejections: state is left untouched
class ValidationRejected(CafeError):
    message = "Invalid request"


class EmptyCartError(ValidationRejected):
    message = "Cart is empty"


class InvalidQuantityError(ValidationRejected):
    message = "Quantity must be at least 1"


class ProductUnavailableError(ValidationRejected):
    message = "Product is not available"


class InvalidExtraError(ValidationRejected):
    message = "Extra not allowed for this product"


class DuplicateEmailError(ValidationRejected):
    message = "Email already registered"


# Unknown identifiers
class NotFoundError(CafeError):
    message = "Not found"


class ProductNotFoundError(NotFoundError):
    message = "Product not found"


class OrderNotFoundError(NotFoundError):
    message = "Order not found"


class UserNotFoundError(NotFoundError):
    message = "User not found"


class InvalidCredentialsError(CafeError):
    # Same message whether or not the email exists
    message = "Invalid credentials"
