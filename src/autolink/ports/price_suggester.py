"""Price suggester port interface."""

from abc import ABC, abstractmethod

from autolink.domain.pricing import PriceSuggestion, PriceSuggestionRequest


class PriceSuggester(ABC):
    """Port interface for the generative price suggestion service."""

    @abstractmethod
    def suggest(self, request: PriceSuggestionRequest) -> PriceSuggestion:
        """
        Suggest a listing price for the described vehicle.

        Args:
            request: Vehicle description with a normalised condition

        Returns:
            Suggested price in US dollars plus the model's reasoning

        Raises:
            ExternalServiceError: If the call fails, times out or the reply
                cannot be parsed
        """
        pass
