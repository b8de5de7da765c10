"""Application services."""

from push_template_renderer.services.delivery_stats import DeliveryStats, DeliveryStatsRecorder
from push_template_renderer.services.message_intake import PushMessageIntake
from push_template_renderer.services.notification_handler import (
    HandleOutcome,
    PushNotificationHandler,
)

__all__ = [
    "DeliveryStats",
    "DeliveryStatsRecorder",
    "HandleOutcome",
    "PushMessageIntake",
    "PushNotificationHandler",
]
