"""
Domain errors raised by the service layer.

Services never build HTTP responses themselves. They raise one of these and
the handler registered in main.py turns it into a JSON body of the form
{"detail": message, **data}.
"""

from decimal import Decimal
from starlette import status


class AppError(Exception):
    """Base class for every error the API reports to the caller."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, data: dict | None = None):
        self.message = message
        self.data = data or {}
        super().__init__(message)


class ValidationError(AppError):
    """Malformed or unresolvable input (unknown product, bad schedule...)."""
    status_code = status.HTTP_400_BAD_REQUEST


class AuthorizationError(AppError):
    """The actor's role does not allow the operation."""
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class BusinessRuleError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class MinimumOrderNotMet(BusinessRuleError):

    def __init__(self, min_order: Decimal, current_total: Decimal):
        self.min_order = min_order
        self.current_total = current_total
        super().__init__(
            f"Minimum order of {min_order:.2f} not reached",
            data={"minOrder": float(min_order), "currentTotal": float(current_total)}
        )


class InvalidTransition(BusinessRuleError):

    def __init__(self, current_status, target_status, allowed_statuses):
        self.current_status = current_status
        self.target_status = target_status
        self.allowed_statuses = list(allowed_statuses)
        super().__init__(
            f"Cannot change order status from {current_status.value} to {target_status.value}",
            data={
                "currentStatus": current_status.value,
                "allowedStatuses": [s.value for s in self.allowed_statuses]
            }
        )


class ConcurrentStatusChange(BusinessRuleError):
    """The order changed between the read and the conditional update."""
    status_code = status.HTTP_409_CONFLICT


class InfrastructureError(AppError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
