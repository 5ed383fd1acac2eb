"""Application error taxonomy. Messages are user-facing and localized (Bengali)."""

from fastapi import status


class AppError(Exception):
    """Base error carrying a user-safe message and the HTTP status it maps to."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "একটি সমস্যা হয়েছে"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingCredentials(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Email এবং Password প্রয়োজন"


class InvalidCredentials(AppError):
    """Unknown email, no local password, or wrong password. One message for all three."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "ইমেইল বা পাসওয়ার্ড সঠিক নয়"


class AccountDeleted(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "এই একাউন্টটি মুছে ফেলা হয়েছে"


class Unauthenticated(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "অনুগ্রহ করে লগইন করুন"


class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "অনুমতি নেই"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "পাওয়া যায়নি"


class ValidationFailed(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "তথ্য সঠিক নয়"


class Conflict(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "এই তথ্য ইতিমধ্যে ব্যবহৃত হচ্ছে"


class StoreError(AppError):
    """Persistence failure; the detail is logged, never returned."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "একটি সমস্যা হয়েছে, আবার চেষ্টা করুন"
