# -*- coding: utf-8 -*-
"""Things shared by all carrier adapters: result and request types, the
adapter record itself and status/time normalization helpers.
"""
import dataclasses
import re
from typing import Callable, Optional, Sequence, Union

from bs4 import BeautifulSoup
from tornado.httpclient import HTTPRequest


__all__ = (
	'STATUS_DELIVERED', 'STATUS_UNREGISTERED', 'STATUS_NOT_RETRIEVED',
	'BROWSER_USER_AGENT', 'Body', 'TrackingResult', 'RequestDescriptor',
	'CarrierAdapter', 'make_soup', 'normalize_status', 'normalize_time',
	'search_time'
)


# Canonical statuses.
STATUS_DELIVERED = '配達完了'
STATUS_UNREGISTERED = '伝票番号未登録'
STATUS_NOT_RETRIEVED = '情報取得できませんでした'

# Some carrier pages refuse requests without a "real" browser signature.
BROWSER_USER_AGENT = (
	'Mozilla/5.0 (Windows NT 10.0; Win64; x64) '
	'AppleWebKit/537.36 (KHTML, like Gecko) '
	'Chrome/115.0.0.0 Safari/537.36'
)

# Raw response body: bytes as received, or already decoded text.
Body = Union[bytes, str]


@dataclasses.dataclass(frozen=True)
class TrackingResult:
	"""Normalized answer for one tracking number.

	Both fields are display strings; `time` is empty when unknown.
	"""
	status: str = ''
	time: str = ''

	def as_dict(self) -> dict:
		return dataclasses.asdict(self)


@dataclasses.dataclass(frozen=True)
class RequestDescriptor:
	"""Everything needed to make one outbound request."""
	method: str
	url: str
	headers: dict = dataclasses.field(default_factory=dict)
	body: Optional[str] = None

	def to_http_request(self, timeout: Optional[float] = None) -> HTTPRequest:
		"""Build tornado request; `timeout` applies both to connect and total time."""
		return HTTPRequest(
			url=self.url,
			method=self.method,
			headers=dict(self.headers),
			body=self.body,
			connect_timeout=timeout,
			request_timeout=timeout
		)


@dataclasses.dataclass(frozen=True)
class CarrierAdapter:
	"""Request builder and response parser of one carrier."""
	key: str
	build_request: Callable[[str], RequestDescriptor]
	extract: Callable[[Body], TrackingResult]


def make_soup(body: Body) -> BeautifulSoup:
	"""Parse HTML document.

	Bytes are passed through as is: BeautifulSoup sniffs the encoding
	(Shift_JIS and EUC-JP pages are still common among carriers).
	"""
	return BeautifulSoup(body, 'html.parser')


def normalize_status(raw: str, rules: Sequence[tuple]) -> str:
	"""Map raw carrier status to canonical one.

	`rules` - ordered (regex, canonical status) pairs, first match wins.
	Raw status is returned unchanged if nothing matches.
	"""
	for pattern, status in rules:
		if re.search(pattern, raw):
			return status

	return raw


_TIME_REPLACEMENTS = (
	(re.compile(r'：'), ':'),
	(re.compile(r'(\d{4})-(\d{1,2})-(\d{1,2})(?:T|\s+)?'), r'\1/\2/\3 '),
	(re.compile(r'(\d+)\s*年\s*'), r'\1/'),
	(re.compile(r'(\d+)\s*月\s*'), r'\1/'),
	(re.compile(r'(\d+)\s*日'), r'\1 '),
	(re.compile(r'(\d+)\s*時\s*(\d+)\s*分'), r'\1:\2'),
	(re.compile(r'(\d+)\s*時'), r'\1:00'),
)


def normalize_time(text: Optional[str]) -> str:
	"""Loose normalization of timestamp text for display.

	'2024年12月1日 10時30分' -> '2024/12/1 10:30'
	'2024-12-01T10:30:00+09:00' -> '2024/12/01 10:30:00+09:00'
	"""
	if not text:
		return ''

	for pattern, replacement in _TIME_REPLACEMENTS:
		text = pattern.sub(replacement, text)

	return ' '.join(text.split())


# Month/day followed by hours:minutes, in either Japanese or slash notation.
_TIME_PATTERNS = (
	re.compile(r'[0-9]{1,2}月[0-9]{1,2}日\s*[0-9]{1,2}[:：][0-9]{2}'),
	re.compile(r'[0-9]{1,2}/[0-9]{1,2}\s+[0-9]{1,2}[:：][0-9]{2}'),
)


def search_time(text: Optional[str]) -> str:
	"""Find first date-time looking fragment in free text."""
	if not text:
		return ''

	for pattern in _TIME_PATTERNS:
		match = pattern.search(text)
		if match:
			return normalize_time(match.group(0))

	return ''
