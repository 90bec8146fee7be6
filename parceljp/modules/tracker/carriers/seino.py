# -*- coding: utf-8 -*-
"""Seino Transportation tracking page.

Results are rendered as read-only form inputs: `haitatsuJokyo<N>` holds
delivery status, `haitatsuTenshoDate<N>` the delivery/transfer date, where
<N> is the index of the queried number (always 0 for us).
"""
import urllib.parse

from parceljp.modules.tracker.carriers.common import (
	STATUS_DELIVERED, STATUS_UNREGISTERED, Body, CarrierAdapter,
	RequestDescriptor, TrackingResult, make_soup, normalize_status,
	normalize_time, search_time
)


KEY = 'seino'

_URL = 'https://track.seino.co.jp/cgi-bin/gnpquery.pgm'

_STATUS_RULES = (
	(r'未登録|誤り', STATUS_UNREGISTERED),
	(r'配達済み', STATUS_DELIVERED),
)


def build_request(tracking_number: str) -> RequestDescriptor:
	query = urllib.parse.urlencode({'GNPNO1': tracking_number})
	return RequestDescriptor('GET', f'{_URL}?{query}')


def _input_value(soup, input_id: str) -> str:
	field = soup.find('input', id=input_id)
	if field is None:
		return ''
	return (field.get('value') or '').strip()


def extract(body: Body) -> TrackingResult:
	soup = make_soup(body)

	raw = _input_value(soup, 'haitatsuJokyo0')
	status = normalize_status(raw, _STATUS_RULES) if raw else ''

	time = ''
	if status == STATUS_DELIVERED:
		# Date field is sometimes empty while status itself carries the date.
		time = normalize_time(_input_value(soup, 'haitatsuTenshoDate0')) or search_time(raw)

	return TrackingResult(status, time)


ADAPTER = CarrierAdapter(KEY, build_request, extract)
