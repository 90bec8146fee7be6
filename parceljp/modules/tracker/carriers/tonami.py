# -*- coding: utf-8 -*-
"""Tonami Transportation tracking page.

Page has two rows headed '最新状況': the first belongs to the search form
legend, the second one is the actual latest status of the parcel.
Delivery shows up as a `table.statusTable` row headed '配完'.
"""
import urllib.parse

from parceljp.modules.tracker.carriers.common import (
	STATUS_DELIVERED, STATUS_NOT_RETRIEVED, STATUS_UNREGISTERED, Body,
	CarrierAdapter, RequestDescriptor, TrackingResult, make_soup,
	normalize_status, normalize_time
)


KEY = 'tonami'

_URL = 'https://trc1.tonami.co.jp/trc/search3/excSearch3'

_STATUS_RULES = (
	(r'該当なし|該当データ|見つかりません', STATUS_UNREGISTERED),
	(r'配達完了|配完', STATUS_DELIVERED),
)

_LATEST_STATUS_POSITION = 2


def build_request(tracking_number: str) -> RequestDescriptor:
	# Their servlet wants literal brackets in the parameter name.
	query = urllib.parse.urlencode({'id[0]': tracking_number}, safe='[]')
	return RequestDescriptor('GET', f'{_URL}?{query}')


def _latest_status(soup) -> str:
	count = 0
	for th in soup.find_all('th'):
		if th.get_text(strip=True) != '最新状況':
			continue
		count += 1
		if count == _LATEST_STATUS_POSITION:
			td = th.parent.find('td') if th.parent else None
			return td.get_text(strip=True) if td else ''

	return ''


def _delivery_time(soup) -> str:
	for tr in soup.select('table.statusTable tr'):
		th = tr.find('th')
		if th is not None and th.get_text(strip=True) == '配完':
			td = tr.find('td')
			return td.get_text(strip=True) if td else ''

	return ''


def extract(body: Body) -> TrackingResult:
	soup = make_soup(body)

	raw = _latest_status(soup)
	delivered_at = _delivery_time(soup)

	status = normalize_status(raw, _STATUS_RULES) if raw else ''
	if status == STATUS_UNREGISTERED:
		return TrackingResult(status, '')

	if delivered_at:
		return TrackingResult(STATUS_DELIVERED, normalize_time(delivered_at))

	return TrackingResult(status or STATUS_NOT_RETRIEVED, '')


ADAPTER = CarrierAdapter(KEY, build_request, extract)
