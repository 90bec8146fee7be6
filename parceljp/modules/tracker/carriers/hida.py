# -*- coding: utf-8 -*-
"""Hida Unyu tracking page (PC version, plain http only)."""
import urllib.parse

from parceljp.modules.tracker.carriers.common import (
	STATUS_DELIVERED, STATUS_UNREGISTERED, Body, CarrierAdapter,
	RequestDescriptor, TrackingResult, make_soup, normalize_status,
	normalize_time
)


KEY = 'hida'

_URL = 'http://www.hida-unyu.co.jp/tsuiseki/sho100.html'

_STATUS_RULES = (
	(r'該当なし', STATUS_UNREGISTERED),
	(r'配達完了|配達済み', STATUS_DELIVERED),
)


def build_request(tracking_number: str) -> RequestDescriptor:
	query = urllib.parse.urlencode({'okurijoNo': tracking_number})
	return RequestDescriptor('GET', f'{_URL}?{query}')


def extract(body: Body) -> TrackingResult:
	soup = make_soup(body)

	node = soup.select_one('span.status, td.status')
	raw = node.get_text(strip=True) if node else ''
	# Page simply has no status block for unknown numbers.
	if not raw:
		return TrackingResult(STATUS_UNREGISTERED, '')

	status = normalize_status(raw, _STATUS_RULES)
	if status == STATUS_UNREGISTERED:
		return TrackingResult(status, '')

	node = soup.select_one('td.time, .date, .delivery-time')
	time = normalize_time(node.get_text(strip=True)) if node else ''

	return TrackingResult(status, time)


ADAPTER = CarrierAdapter(KEY, build_request, extract)
