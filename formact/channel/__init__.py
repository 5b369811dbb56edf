"""Change notification channel between Form, Fields and listeners."""

from formact.channel.notifier import Channel, SubmitEvent

__all__ = ["Channel", "SubmitEvent"]
