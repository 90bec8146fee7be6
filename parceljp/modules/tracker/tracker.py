# -*- coding: utf-8 -*-
"""Low-level module for tracking info: routes one lookup either to a scraping
adapter or to Track123.
"""
import asyncio
import dataclasses
import functools
import sys
from typing import Callable, Mapping, Optional

from tornado.httpclient import AsyncHTTPClient
from tornado.log import app_log

from parceljp.environs import env
from parceljp.modules.tracker import track123
from parceljp.modules.tracker.carriers import ADAPTERS
from parceljp.modules.tracker.carriers.common import Body, CarrierAdapter, RequestDescriptor, TrackingResult
from parceljp.modules.tracker.errors import InvalidInput, UnsupportedCarrier, UpstreamError

# Japanese tracking numbers are 10-14 digits, but just in case...
# For input validation:
TRACKING_NUMBER_MAX_LENGTH = 128


@dataclasses.dataclass(frozen=True)
class TrackerConfig:
	"""Settings of outbound requests."""
	track123_url: str
	track123_secret: str
	# Seconds, for both connecting and whole request.
	request_timeout: float = 20.0

	@classmethod
	def from_env(cls) -> 'TrackerConfig':
		return cls(
			track123_url=env.TRACK123_API_URL,
			track123_secret=env.TRACK123_API_SECRET,
			request_timeout=env.REQUEST_TIMEOUT
		)


class Tracker:
	"""Dispatches lookups.

	Holds no state between calls: `adapters` and `courier_codes` are read-only
	mappings, `http_client` only makes requests.
	"""

	def __init__(
		self,
		config: TrackerConfig,
		http_client: Optional[AsyncHTTPClient] = None,
		adapters: Mapping[str, CarrierAdapter] = ADAPTERS,
		courier_codes: Mapping[str, str] = track123.COURIER_CODES
	):
		self.config = config
		self.adapters = adapters
		self.courier_codes = courier_codes
		self._http_client = http_client

	@property
	def http_client(self) -> AsyncHTTPClient:
		# AsyncHTTPClient is bound to the current IOLoop, so don't create it
		# before the loop is running.
		return self._http_client or AsyncHTTPClient()

	async def lookup(self, carrier: str, tracking_number: str) -> TrackingResult:
		"""Get tracking info of `tracking_number` from `carrier`.

		Scraping adapter is used if registered, otherwise Track123 if the
		carrier has a courier code there.

		InvalidInput, UnsupportedCarrier or UpstreamError will be raised.
		"""
		carrier = (carrier or '').strip()
		tracking_number = (tracking_number or '').strip()
		if not carrier or not tracking_number:
			raise InvalidInput('Both carrier and tracking number are required')

		adapter = self.adapters.get(carrier)
		if adapter is not None:
			return await self._fetch_and_extract(
				functools.partial(adapter.build_request, tracking_number),
				adapter.extract,
				source=carrier
			)

		courier_code = self.courier_codes.get(carrier)
		if courier_code is not None:
			return await self._fetch_and_extract(
				functools.partial(
					track123.build_request,
					self.config.track123_url,
					self.config.track123_secret,
					tracking_number,
					courier_code
				),
				track123.extract,
				source=f'Track123 ({courier_code})'
			)

		app_log.info('Unsupported carrier requested: %r', carrier)
		raise UnsupportedCarrier(f'Unsupported carrier: {carrier}')

	async def _fetch_and_extract(
		self,
		build_request: Callable[[], RequestDescriptor],
		extract: Callable[[Body], TrackingResult],
		source: str
	) -> TrackingResult:
		"""Builds and makes the request, then parses its body.

		Whatever goes wrong (bad request data, connection, timeout, non-2xx
		status, unexpected markup) is logged and reported as UpstreamError
		without details.
		"""
		try:
			request = build_request().to_http_request(timeout=self.config.request_timeout)
			response = await self.http_client.fetch(request)
			return extract(response.body)
		except Exception as e:
			app_log.warning('Tracking lookup via %s failed', source, exc_info=True)
			raise UpstreamError(f'Can\'t get info from {source}') from e


async def main():
	"""For local manual testing: manage.py-less lookup.

	python -m parceljp.modules.tracker.tracker sagawa 1234567890
	"""
	carrier, tracking_number = sys.argv[1:3]
	tracker = Tracker(TrackerConfig.from_env())
	print(await tracker.lookup(carrier, tracking_number))


if __name__ == '__main__':
	asyncio.run(main())
