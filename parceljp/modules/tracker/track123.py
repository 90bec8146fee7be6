# -*- coding: utf-8 -*-
"""Handles Track123 aggregation API, used for carriers we don't scrape.

API reference:
https://www.track123.com/api-docs

Query endpoint accepts several numbers of one courier at once and answers
with "accepted" and "rejected" lists. Layout of accepted records is not
stable between API versions, so every field is read through an ordered list
of possible paths, first present wins.
"""
import json
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from parceljp.modules.tracker.carriers.common import (
	STATUS_DELIVERED, STATUS_UNREGISTERED, Body, RequestDescriptor,
	TrackingResult, normalize_status, normalize_time
)
from parceljp.modules.tracker.errors import UpstreamError


# Carrier key -> Track123 courier code.
# Used only for carriers without scraping adapter.
COURIER_CODES: Mapping[str, str] = MappingProxyType({
	'japanpost': 'japan-post',
	'nittsu': 'nippon-express',
	'kintetsu': 'kintetsu-world-express',
	'ecohai': 'eco-hai',
	# Scraped carriers; adapters take precedence.
	'sagawa': 'sagawa',
	'yamato': 'yamato',
	'fukutsu': 'fukuyama',
	'seino': 'seino',
	'tonami': 'tonami',
	'hida': 'hida-unyu',
})

STATUS_UNKNOWN = '不明'

# Any other 'code' means the whole query was refused (bad secret, quota...).
_SUCCESS_CODE = '00000'


# Expected response: describe only keys we are using.
class _Response(BaseModel):
	model_config = ConfigDict(extra='ignore', coerce_numbers_to_str=True)

	code: Optional[str] = None
	msg: Optional[str] = None
	data: Union[dict, list, None] = None


# Relative to "data" of the response.
_RECORD_PATHS = (
	('accepted', 'content', 0),
	('content', 0),
	(0,),
)

_STATUS_PATHS = (
	('transitStatus',),
	('trackingStatus',),
	('status',),
)

_TIME_PATHS = (
	('deliveredTime',),
	('lastTrackingTime',),
	('localLogisticsInfo', 'trackingDetails', 0, 'eventTime'),
	('latestEventTime',),
)

_STATUS_RULES = (
	(r'^(NO_RECORD|NOT_FOUND)$', STATUS_UNREGISTERED),
	(r'^DELIVERED$', STATUS_DELIVERED),
)


def _get_path(data: Any, path: Sequence) -> Any:
	for step in path:
		try:
			data = data[step]
		except (KeyError, IndexError, TypeError):
			return None
	return data


def first_present(data: Any, paths: Sequence[Sequence]) -> Optional[Any]:
	"""Value of the first path that leads to a non-empty value."""
	for path in paths:
		value = _get_path(data, path)
		if value not in (None, '', [], {}):
			return value
	return None


def build_request(
	url: str,
	secret: str,
	tracking_number: str,
	courier_code: str
) -> RequestDescriptor:
	body = json.dumps(
		{'trackNos': [tracking_number], 'courierCode': courier_code},
		separators=(',', ':')
	)
	return RequestDescriptor(
		'POST',
		url,
		headers={
			'Content-Type': 'application/json',
			'Accept': 'application/json',
			'Track123-Api-Secret': secret
		},
		body=body
	)


def extract(body: Body) -> TrackingResult:
	"""Map Track123 response to TrackingResult.

	UpstreamError is raised if response is not a JSON object or API reports
	failure. Missing record or fields are not errors: status degrades to
	'不明', time to empty string.
	"""
	try:
		response = _Response.model_validate_json(body)
	except ValidationError as e:
		raise UpstreamError('Invalid response from Track123') from e

	if response.code is not None and response.code != _SUCCESS_CODE:
		raise UpstreamError(f'Track123 refused the query: {response.code} {response.msg}')

	record = first_present(response.data, _RECORD_PATHS)

	raw = first_present(record, _STATUS_PATHS)
	status = normalize_status(str(raw), _STATUS_RULES) if raw is not None else STATUS_UNKNOWN

	time = first_present(record, _TIME_PATHS)
	time = normalize_time(str(time)) if time is not None else ''

	return TrackingResult(status, time)
