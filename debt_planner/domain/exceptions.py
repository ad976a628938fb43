"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class DataUnavailableError(DomainException):
    """Debt records could not be read from the store or accounts service"""

    pass


class InvalidStrategyError(DomainException):
    """Requested payoff strategy is not registered"""

    def __init__(self, strategy: str):
        self.strategy = strategy
        super().__init__(f"Unknown payoff strategy: {strategy!r}")
