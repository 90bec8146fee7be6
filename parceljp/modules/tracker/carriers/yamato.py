# -*- coding: utf-8 -*-
"""Yamato Transport (Kuroneko) tracking page.

The inquiry form is POSTed; the endpoint answers with an error page unless
the request looks like it comes from their own form in a desktop browser,
hence User-Agent and Referer.

Result page has one `tracking-invoice-block` per number: state title, summary
and an ordered list of detail steps (`div.item` + `div.date`).
"""
import urllib.parse

from parceljp.modules.tracker.carriers.common import (
	BROWSER_USER_AGENT, STATUS_DELIVERED, STATUS_UNREGISTERED, Body,
	CarrierAdapter, RequestDescriptor, TrackingResult, make_soup,
	normalize_status, normalize_time, search_time
)


KEY = 'yamato'

_URL = 'https://toi.kuronekoyamato.co.jp/cgi-bin/tneko'

_STATUS_RULES = (
	(r'伝票番号未登録|伝票番号誤り|該当なし', STATUS_UNREGISTERED),
	(r'配達完了', STATUS_DELIVERED),
)


def build_request(tracking_number: str) -> RequestDescriptor:
	return RequestDescriptor(
		'POST',
		_URL,
		headers={
			'Content-Type': 'application/x-www-form-urlencoded',
			'Referer': _URL,
			'User-Agent': BROWSER_USER_AGENT
		},
		# Form allows up to 10 numbers, we always ask for one.
		body=urllib.parse.urlencode({'number00': '1', 'number01': tracking_number})
	)


def _delivery_time(soup) -> str:
	for step in soup.select('div.tracking-invoice-block-detail ol li'):
		item = step.select_one('div.item')
		if item is not None and '配達完了' in item.get_text():
			date = step.select_one('div.date')
			if date is not None:
				return normalize_time(date.get_text(strip=True))

	# Fallback: summary usually mentions the date in free text.
	summary = soup.select_one('div.tracking-invoice-block-summary')
	if summary is not None:
		return search_time(summary.get_text(' ', strip=True))

	return ''


def extract(body: Body) -> TrackingResult:
	soup = make_soup(body)

	title = soup.select_one('h4.tracking-invoice-block-state-title')
	raw = title.get_text(strip=True) if title else ''
	if not raw:
		return TrackingResult()

	status = normalize_status(raw, _STATUS_RULES)
	time = _delivery_time(soup) if status == STATUS_DELIVERED else ''

	return TrackingResult(status, time)


ADAPTER = CarrierAdapter(KEY, build_request, extract)
