"""Ordered filter hooks for transforming rendered branding output.

A filter is a callable registered under a name. ``apply_filters`` passes a
value through every callable registered for that name, lowest priority
first and in registration order within a priority, and returns the result.
"""

import logging
from collections import defaultdict

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 10


class FilterRegistry:
    """Named, prioritised lists of value-transforming callables."""

    def __init__(self):
        self._filters = defaultdict(list)

    def add_filter(self, name, callback, priority=DEFAULT_PRIORITY):
        """Register ``callback`` for ``name``.

        Registering the same callback twice at one priority is a no-op.
        """
        if not callable(callback):
            raise TypeError(f"Filter for {name!r} must be callable")
        if (priority, callback) in self._filters[name]:
            return
        self._filters[name].append((priority, callback))
        # Stable sort keeps registration order within a priority
        self._filters[name].sort(key=lambda entry: entry[0])

    def remove_filter(self, name, callback, priority=DEFAULT_PRIORITY):
        """Unregister ``callback``. Returns True if it was registered."""
        entries = self._filters.get(name, [])
        for index, (entry_priority, entry_callback) in enumerate(entries):
            if entry_priority == priority and entry_callback == callback:
                del entries[index]
                return True
        return False

    def has_filter(self, name, callback=None):
        entries = self._filters.get(name, [])
        if callback is None:
            return bool(entries)
        return any(entry_callback == callback for _, entry_callback in entries)

    def apply_filters(self, name, value, *args):
        """Pass ``value`` (and any extra ``args``) through each filter."""
        for _, callback in list(self._filters.get(name, [])):
            value = callback(value, *args)
        return value

    def clear(self, name=None):
        if name is None:
            self._filters.clear()
        else:
            self._filters.pop(name, None)


def get_filters(filters=None):
    """Return ``filters`` or, when None, the branding app's registry."""
    if filters is not None:
        return filters
    from django.apps import apps

    return apps.get_app_config("branding").filters
