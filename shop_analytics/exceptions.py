"""
Exception hierarchy for Shop Analytics Service
"""


class ShopAnalyticsError(Exception):
    """Base exception for shop_analytics"""
    pass


class ReferentialIntegrityError(ShopAnalyticsError):
    """Foreign reference does not resolve, or a referenced row would be orphaned"""
    pass


class InsufficientStockError(ShopAnalyticsError):
    """Insufficient stock"""
    pass


class DataSourceUnavailableError(ShopAnalyticsError):
    """Database is unreachable or timed out"""
    pass
