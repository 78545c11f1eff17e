from .portfolio_client import PortfolioApiClient, PortfolioApiError

__all__ = ["PortfolioApiClient", "PortfolioApiError"]
