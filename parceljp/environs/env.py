# -*- coding: utf-8 -*-
"""'Externally' adjustable config vars.
"""
from os import environ

# Default HTTPS port by default.
PORT = int(environ['PORT']) if 'PORT' in environ else 443

# Timeout (seconds) of every outbound request: carrier pages and Track123.
REQUEST_TIMEOUT = float(environ.get('REQUEST_TIMEOUT', '20'))

# Everything for tracking through Track123 (carriers we don't scrape).
TRACK123_API_URL = environ.get(
	'TRACK123_API_URL',
	'https://api.track123.com/gateway/open-api/tk/v2/track/query'
)
# Without the secret Track123 answers with an error, i.e. fallback lookups
# will fail. Scraping still works, so don't refuse to start.
TRACK123_API_SECRET = environ.get('TRACK123_API_SECRET', '')
