#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Main module of the program, executable."""
import asyncio
import os.path
from typing import Optional

from tornado.log import app_log
from tornado.options import define, options, parse_command_line
import tornado.web

from parceljp import api
from parceljp.environs import env
from parceljp.modules.tracker.tracker import Tracker, TrackerConfig


define("port", default=env.PORT, help="run on the given port", type=int)

# pylint: disable=bad-whitespace
handlers = [
	(r"/api/healthcheck",                           api.healthcheck.HealthCheckHandler),
	(r"/api/version",                               api.version.VersionHandler),

	# API
	(r"/api/tracker",                               api.tracker.TrackerHandler),
]
# pylint: enable=bad-whitespace


class Application(tornado.web.Application):
	"""Main application class.

	`tracker` - dispatcher to serve lookups with; built from environment if
	not given.
	"""
	def __init__(self, tracker: Optional[Tracker] = None):
		# Read app version.
		workdir = os.path.dirname(os.path.realpath(__file__))
		with open(os.path.join(workdir, 'VERSION')) as file:
			self.version = file.read().strip()

		if tracker is None:
			config = TrackerConfig.from_env()
			if not config.track123_secret:
				app_log.warning('TRACK123_API_SECRET is not set: lookups via Track123 will fail')
			tracker = Tracker(config)
		self.tracker = tracker

		super().__init__(handlers)


async def main():
	"""Main function of the program."""
	# Also sets up tornado logging (--logging=debug etc.).
	parse_command_line()

	server = Application()
	server.listen(options.port)
	app_log.info('Serving version %s on port %d', server.version, options.port)
	await asyncio.Event().wait()


if __name__ == "__main__":
	asyncio.run(main())
