# -*- coding: utf-8 -*-
import json

import pytest

from parceljp.modules.tracker import track123
from parceljp.modules.tracker.carriers.common import STATUS_DELIVERED, STATUS_UNREGISTERED, TrackingResult
from parceljp.modules.tracker.errors import UpstreamError


def _accepted(*records, code='00000'):
	return json.dumps({
		'code': code,
		'msg': 'success',
		'data': {'accepted': {'content': list(records)}, 'rejected': []}
	})


def test_build_request():
	request = track123.build_request('https://track123.test/query', 's3cret', '123456789012', 'japan-post')

	assert request.method == 'POST'
	assert request.url == 'https://track123.test/query'
	assert request.headers['Track123-Api-Secret'] == 's3cret'
	assert request.headers['Content-Type'] == 'application/json'
	assert json.loads(request.body) == {'trackNos': ['123456789012'], 'courierCode': 'japan-post'}


def test_delivered():
	body = _accepted({
		'trackNo': '123456789012',
		'transitStatus': 'DELIVERED',
		'trackingStatus': '001',
		'deliveredTime': '2024-12-01 10:30:00',
		'lastTrackingTime': '2024-11-30 09:00:00',
	})
	assert track123.extract(body) == TrackingResult(STATUS_DELIVERED, '2024/12/01 10:30:00')


@pytest.mark.parametrize('status', ['NO_RECORD', 'NOT_FOUND'])
def test_not_found(status):
	assert track123.extract(_accepted({'transitStatus': status})) == TrackingResult(STATUS_UNREGISTERED, '')


def test_status_falls_back_to_tracking_status():
	body = _accepted({
		'transitStatus': '',
		'trackingStatus': 'IN_TRANSIT',
		'localLogisticsInfo': {'trackingDetails': [{'eventTime': '2024-11-30 18:02:00'}]},
	})
	assert track123.extract(body) == TrackingResult('IN_TRANSIT', '2024/11/30 18:02:00')


def test_no_status_fields():
	assert track123.extract(_accepted({'trackNo': '123'})) == TrackingResult(track123.STATUS_UNKNOWN, '')


def test_no_record_at_all():
	body = json.dumps({'code': '00000', 'data': {'accepted': {'content': []}, 'rejected': [{'trackNo': '1'}]}})
	assert track123.extract(body) == TrackingResult(track123.STATUS_UNKNOWN, '')


def test_flat_content_layout():
	body = json.dumps({'data': {'content': [{'status': 'IN_TRANSIT', 'latestEventTime': '2024-11-30 18:02'}]}})
	assert track123.extract(body.encode('utf-8')) == TrackingResult('IN_TRANSIT', '2024/11/30 18:02')


@pytest.mark.parametrize('body', [
	'<html>Bad Gateway</html>',
	'[]',
	'',
	_accepted({'transitStatus': 'DELIVERED'}, code='A0400'),
])
def test_invalid_or_refused_response(body):
	with pytest.raises(UpstreamError):
		track123.extract(body)


def test_first_present_skips_empty_values():
	data = {'a': '', 'b': {'c': [None, 'x']}, 'd': 'y'}
	assert track123.first_present(data, (('a',), ('b', 'c', 0), ('b', 'c', 1), ('d',))) == 'x'
	assert track123.first_present(data, (('missing',), ('b', 'c', 5))) is None
	assert track123.first_present(None, (('a',),)) is None


def test_courier_codes_cover_fallback_only_carriers():
	for carrier in ('japanpost', 'nittsu', 'kintetsu', 'ecohai'):
		assert carrier in track123.COURIER_CODES
