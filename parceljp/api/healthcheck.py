# -*- coding: utf-8 -*-
"""Module with health check handler for load balancers: answers "ok" to any
GET/POST request as long as the process serves requests. Carriers are not
contacted.
"""
from parceljp.base_handler import BaseHandler


class HealthCheckHandler(BaseHandler):
	ALLOWED_METHODS = ('GET', 'POST', 'OPTIONS')

	def get(self):
		self.write("ok")

	def post(self):
		self.set_status(201)
		self.write("ok")
