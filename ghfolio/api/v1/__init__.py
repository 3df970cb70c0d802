from ghfolio.api.v1 import portfolio

__all__ = ["portfolio"]
