"""Payment adapters."""
from .mock_payment_gateway import MockPaymentGateway
from .stripe_payment_gateway import StripePaymentGateway

__all__ = ["MockPaymentGateway", "StripePaymentGateway"]
