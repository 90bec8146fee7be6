# -*- coding: utf-8 -*-
"""Common module for all handlers in parceljp.api, providing a BaseHandler
class that all handlers should inherit from as well as ApplicationError class.
"""
import json
from typing import Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError
from tornado import escape
import tornado.web


__all__ = ('ApplicationError', 'BaseHandler')


_Model_T = TypeVar('_Model_T', bound=BaseModel)


class ApplicationError(tornado.web.HTTPError):
	"""An override of a standard tornado HTTPError class for custom handling."""

	def __init__(self, status_code: int, message: str, *args, **kwargs):
		self.message = message
		# Reason goes to the status line, which must stay a single line.
		super().__init__(status_code, *args, reason=' '.join(message.split()), **kwargs)


# pylint: disable=abstract-method
class BaseHandler(tornado.web.RequestHandler):
	"""Base API class for all endpoints.

	Inherit from this if you want to create a new handler.
	Set ALLOWED_METHODS to what the handler implements: it is announced both
	in CORS headers and in the Allow header of 405 responses.
	"""
	ALLOWED_METHODS = ('GET', 'OPTIONS')

	def set_default_headers(self):
		self.set_header('Access-Control-Allow-Origin', '*')
		self.set_header('Access-Control-Allow-Methods', ', '.join(self.ALLOWED_METHODS))
		self.set_header('Access-Control-Allow-Headers', 'Content-Type')

	def options(self, *args, **kwargs):  # pylint: disable=arguments-differ
		"""All OPTIONS (CORS preflight) requests get empty 204 by default."""
		self.set_status(204)
		self.finish()

	def write(self, chunk):
		"""Overload of Tornado RequestHandler.write().

		Dicts are sent as JSON.
		"""
		if isinstance(chunk, dict):
			chunk = json.dumps(
				chunk,
				ensure_ascii=False,
				separators=(',', ':')
			).replace("</", "<\\/")

			self.set_header("Content-Type", "application/json; charset=UTF-8")

		super().write(chunk)

	def write_error(self, status_code, **kwargs):  # pylint: disable=arguments-differ
		"""Send error response to client based on HTTPError-derived exception.

		NOTE:
		This should not be called directly.

		Allows to easily report errors via ApplicationError, specifying desired
		code and message. Tornado catches all HTTPError-derived exceptions and
		feeds to this method. Any other exception ends up here as 500 with
		the standard reason, so internals never leak to the client.

		Body is always {"error": <message>}.
		"""
		exception = kwargs.get("exc_info", (None, None, None))[1]
		if isinstance(exception, ApplicationError):
			message = exception.message
		else:
			message = self._reason

		if status_code == 405:
			self.set_header('Allow', ', '.join(self.ALLOWED_METHODS))

		self.set_status(status_code)
		self.finish({'error': message})

	def parse_json(self, json_: Optional[str] = None):
		"""Parses data from json: either given string or self.request.body."""
		if not json_:
			json_ = self.request.body

		try:
			request = escape.json_decode(json_)
		except ValueError as e:
			raise ApplicationError(status_code=400, message="Bad JSON in request body") from e

		return request

	def validate(
		self,
		model: Type[_Model_T],
		data=None,
		http_error_code: int = 400,
		custom_message: Optional[str] = None
	) -> _Model_T:
		"""Validates `data` according to pydantic `model`.

		If `data` is None then request body (JSON) will be used.
		Validated model instance will be returned. `model` may contain
		transform instructions (stripping, coercion), so the returned values
		may be different from the original `data`.

		In case of validation error ApplicationError with given error_code
		will be raised with given message or validator message by default.
		"""
		if not isinstance(http_error_code, int):
			raise TypeError("http_error_code should be integer")

		# Validate HTTP error code
		if http_error_code < 400 or http_error_code >= 600:
			raise ValueError("http_error_code should be in range [400, 600)")

		if data is None:
			data = self.parse_json()

		try:
			return model.model_validate(data)
		except ValidationError as e:
			message = str(e) if custom_message is None else custom_message
			raise ApplicationError(
				status_code=http_error_code,
				message=message
			) from e

	def validate_query_string(self, model: Type[_Model_T], **kwargs) -> _Model_T:
		"""Validate GET request args with pydantic.

		All query-string args zipped into dict which then validated by specified
		model. All GET-request args are strings.
		"""
		return self.validate(
			model,
			{k: self.get_argument(k) for k in self.request.arguments},
			**kwargs
		)
