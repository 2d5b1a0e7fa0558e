"""Payment gateway port interface."""

from abc import ABC, abstractmethod

from autolink.domain.checkout import CheckoutSessionRequest


class PaymentGateway(ABC):
    """Port interface for a hosted-checkout payment provider."""

    @abstractmethod
    def create_session(self, request: CheckoutSessionRequest) -> str:
        """
        Create a hosted checkout session.

        Returns:
            Opaque session id used to redirect the buyer

        Raises:
            ExternalServiceError: If the provider call fails or returns no id
        """
        pass
