# -*- coding: utf-8 -*-
"""Separate file for tracking exception classes to avoid circular import.

Messages of these exceptions are safe to show to API clients: details of
upstream failures go to the log, never into the message.
"""


class TrackingError(Exception):
	"""Base class for all tracking errors."""
	pass


class InvalidInput(TrackingError):
	"""Carrier or tracking number is missing."""
	pass


class UnsupportedCarrier(TrackingError):
	"""Neither scraping adapter nor fallback exists for the carrier."""
	pass


class UpstreamError(TrackingError):
	"""Carrier site or aggregation API failed, or its answer is unreadable."""
	pass
