# -*- coding: utf-8 -*-
"""Module with handler that allows to GET running application version.
"""
from parceljp.base_handler import BaseHandler


class VersionHandler(BaseHandler):
	def get(self):
		"""Return version read from VERSION file at start-up."""
		self.write({"version": self.application.version})
