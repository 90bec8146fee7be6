# -*- coding: utf-8 -*-
"""Fukuyama Transporting (Fukutsu) tracking page.

Status message is the red bold line. The page has no labels around the
details, so delivery date is taken by position: it is the 5th bare <strong>
element (no attributes, plain text) of the document.
"""
import urllib.parse

from parceljp.modules.tracker.carriers.common import (
	STATUS_DELIVERED, STATUS_UNREGISTERED, Body, CarrierAdapter,
	RequestDescriptor, TrackingResult, make_soup, normalize_status,
	normalize_time
)


KEY = 'fukutsu'

_URL = 'https://corp.fukutsu.co.jp/situation/tracking_no_hunt/'

# Page wording is fixed, exact matches only.
_STATUS_RULES = (
	(r'^該当データはありません。$', STATUS_UNREGISTERED),
	(r'^配達完了です$', STATUS_DELIVERED),
)

_DELIVERY_TIME_POSITION = 4


def build_request(tracking_number: str) -> RequestDescriptor:
	return RequestDescriptor('GET', _URL + urllib.parse.quote(tracking_number, safe=''))


def extract(body: Body) -> TrackingResult:
	soup = make_soup(body)

	message = soup.select_one('strong.redbold')
	raw = message.get_text(strip=True) if message else ''
	status = normalize_status(raw, _STATUS_RULES) if raw else ''

	time = ''
	if status == STATUS_DELIVERED:
		bare = [
			strong.string for strong in soup.find_all('strong')
			if not strong.attrs and strong.find(True) is None and strong.string
		]
		if len(bare) > _DELIVERY_TIME_POSITION:
			time = normalize_time(bare[_DELIVERY_TIME_POSITION].strip())

	return TrackingResult(status, time)


ADAPTER = CarrierAdapter(KEY, build_request, extract)
