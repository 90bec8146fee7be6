# -*- coding: utf-8 -*-
"""Module with handler that allows to look up tracking info.
"""
from parceljp.base_handler import BaseHandler, ApplicationError
from parceljp.modules.tracker.errors import InvalidInput, UnsupportedCarrier, UpstreamError
from parceljp.validation.tracker import TrackingRequest, TRACKING_TOO_LONG_MESSAGE, USER_REQUEST_ERROR_MESSAGE


class TrackerHandler(BaseHandler):
	"""Same lookup either as GET with query string or POST with JSON body:
	{"carrier": "sagawa", "tracking": "1234567890"}
	"""
	ALLOWED_METHODS = ('GET', 'POST', 'OPTIONS')

	async def get(self):
		request = self.validate_query_string(TrackingRequest, custom_message=USER_REQUEST_ERROR_MESSAGE)
		await self._lookup(request)

	async def post(self):
		request = self.validate(TrackingRequest, custom_message=USER_REQUEST_ERROR_MESSAGE)
		await self._lookup(request)

	async def _lookup(self, request: TrackingRequest):
		if request.tracking_too_long:
			raise ApplicationError(status_code=400, message=TRACKING_TOO_LONG_MESSAGE)

		try:
			result = await self.application.tracker.lookup(request.carrier, request.tracking)
		except InvalidInput:
			raise ApplicationError(status_code=400, message=USER_REQUEST_ERROR_MESSAGE)
		except UnsupportedCarrier:
			raise ApplicationError(status_code=404, message='Unsupported carrier')
		except UpstreamError:
			# Blame it on carrier. Details are already logged.
			raise ApplicationError(status_code=500, message='Failed to get tracking info')

		self.write(result.as_dict())
