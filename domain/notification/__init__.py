"""Notification Bounded Context.

Decides whether and what to surface for a boundary check, and owns the
notification timeline:
- Value Objects: NotificationState, NotificationTimings, NotificationContent
- Controller: NotificationLifecycle
- Ports: NotificationHost, Scheduler
"""
