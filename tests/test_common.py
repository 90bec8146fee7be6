# -*- coding: utf-8 -*-
import pytest

from parceljp.modules.tracker.carriers.common import (
	RequestDescriptor, TrackingResult, normalize_status, normalize_time, search_time
)


@pytest.mark.parametrize('text,expected', [
	('2024年12月01日 10時30分', '2024/12/01 10:30'),
	('12月1日 9時05分', '12/1 9:05'),
	('12月01日10：30', '12/01 10:30'),
	('2024年12月01日', '2024/12/01'),
	('2024-12-01 10:30:00', '2024/12/01 10:30:00'),
	('2024-12-01T10:30:00+09:00', '2024/12/01 10:30:00+09:00'),
	('  12/01   10:30 ', '12/01 10:30'),
	('', ''),
	(None, ''),
])
def test_normalize_time(text, expected):
	assert normalize_time(text) == expected


def test_normalize_status_first_match_wins():
	rules = (
		(r'未登録', 'unregistered'),
		(r'配達', 'delivered'),
	)
	assert normalize_status('配達先未登録', rules) == 'unregistered'
	assert normalize_status('配達済み', rules) == 'delivered'
	assert normalize_status('輸送中', rules) == '輸送中'


@pytest.mark.parametrize('text,expected', [
	('お荷物は12月01日 10:30に配達しました', '12/01 10:30'),
	('配達済み 12/01 10:30', '12/01 10:30'),
	('配達済み', ''),
	(None, ''),
])
def test_search_time(text, expected):
	assert search_time(text) == expected


def test_request_descriptor_to_http_request():
	descriptor = RequestDescriptor('POST', 'https://example.com/track', {'Content-Type': 'text/plain'}, 'x')
	request = descriptor.to_http_request(timeout=5)

	assert request.method == 'POST'
	assert request.url == 'https://example.com/track'
	assert request.headers['Content-Type'] == 'text/plain'
	assert request.body == b'x'
	assert request.connect_timeout == 5
	assert request.request_timeout == 5


def test_tracking_result_defaults_to_empty_strings():
	assert TrackingResult().as_dict() == {'status': '', 'time': ''}
