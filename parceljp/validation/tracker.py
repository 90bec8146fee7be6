# -*- coding: utf-8 -*-
"""Module with validation models for client tracker requests.
"""
from pydantic import BaseModel, ConfigDict, Field

from parceljp.modules.tracker.tracker import TRACKING_NUMBER_MAX_LENGTH


class TrackingRequest(BaseModel):
	"""Used to validate TrackerHandler requests (query string or JSON body).

	Only presence is checked here: unknown carriers are reported by the
	tracker, too long tracking numbers by the handler.
	"""
	# Tracking numbers are often sent as JSON numbers.
	model_config = ConfigDict(str_strip_whitespace=True, coerce_numbers_to_str=True, extra='ignore')

	carrier: str = Field(min_length=1)
	tracking: str = Field(min_length=1)

	@property
	def tracking_too_long(self) -> bool:
		return len(self.tracking) > TRACKING_NUMBER_MAX_LENGTH


# Shown instead of pydantic message for any problem with the above.
USER_REQUEST_ERROR_MESSAGE = 'Both "carrier" and "tracking" are required'

TRACKING_TOO_LONG_MESSAGE = f'"tracking" is too long (max {TRACKING_NUMBER_MAX_LENGTH} characters)'
