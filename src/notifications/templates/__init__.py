"""Staff alert templates."""

from notifications.templates.new_order import NewOrderNotice, NewOrderTemplate

__all__ = ["NewOrderNotice", "NewOrderTemplate"]
