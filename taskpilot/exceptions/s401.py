
from .base import BaseCustomHTTPException


class UnauthenticatedException(BaseCustomHTTPException):
    def __init__(self):
        super().__init__(401, "Not authenticated")


class InvalidCredentialsException(BaseCustomHTTPException):
    def __init__(self):
        super().__init__(401, "Invalid credentials")
