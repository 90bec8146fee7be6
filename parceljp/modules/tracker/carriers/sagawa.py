# -*- coding: utf-8 -*-
"""Sagawa Express tracking page.

Search result is a plain GET page: status is in `span.state`, details are
<dt>/<dd> pairs of `dl.okurijo_info`, delivery date labeled '配達完了日'.
"""
import urllib.parse

from parceljp.modules.tracker.carriers.common import (
	STATUS_DELIVERED, STATUS_UNREGISTERED, Body, CarrierAdapter,
	RequestDescriptor, TrackingResult, make_soup, normalize_status,
	normalize_time
)


KEY = 'sagawa'

_URL = 'https://k2k.sagawa-exp.co.jp/p/web/okurijosearch.do'

_STATUS_RULES = (
	(r'^該当なし$', STATUS_UNREGISTERED),
	(r'配達完了|配達済み', STATUS_DELIVERED),
)


def build_request(tracking_number: str) -> RequestDescriptor:
	query = urllib.parse.urlencode({'okurijoNo': tracking_number})
	return RequestDescriptor('GET', f'{_URL}?{query}')


def extract(body: Body) -> TrackingResult:
	soup = make_soup(body)

	state = soup.select_one('span.state')
	raw = state.get_text(strip=True) if state else ''
	status = normalize_status(raw, _STATUS_RULES) if raw else ''

	time = ''
	for dt in soup.select('dl.okurijo_info dt'):
		if '配達完了日' in dt.get_text():
			dd = dt.find_next_sibling('dd')
			if dd is not None:
				time = normalize_time(dd.get_text(strip=True))
			break

	return TrackingResult(status, time)


ADAPTER = CarrierAdapter(KEY, build_request, extract)
