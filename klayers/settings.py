"""
Copyright 2017 Deepgram

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import os
import logging

import yaml

from .backend import Backend
from .errors import InvalidArgumentError, ParsingError

logger = logging.getLogger(__name__)

###############################################################################
class Settings:
	""" Configuration shared by the layer functions.

		Settings are always passed explicitly. Nothing here reads the
		framework's process-wide configuration unless `from_backend()` is
		called.

		# Fields

		floatx: str (default: "float32"). The data type given to Input layers
			which do not specify one.
		backend: None, str, dict or Backend (default: None). The backend
			specification; see `Backend.from_specification()`.
	"""

	DEFAULT_FLOATX = 'float32'
	SUPPORTED_FLOATX = ('float16', 'bfloat16', 'float32', 'float64')

	ENV_FLOATX = 'KLAYERS_FLOATX'
	ENV_BACKEND = 'KLAYERS_BACKEND'

	###########################################################################
	def __init__(self, floatx=None, backend=None):
		""" Creates a new settings object.
		"""
		if floatx is None:
			floatx = self.DEFAULT_FLOATX
		if floatx not in self.SUPPORTED_FLOATX:
			raise InvalidArgumentError('"floatx" must be one of: {}. '
				'Received: {!r}'.format(', '.join(self.SUPPORTED_FLOATX),
				floatx))

		self.floatx = floatx
		self.backend = backend
		self._backend = backend if isinstance(backend, Backend) else None

	###########################################################################
	def __repr__(self):
		""" Return a string representation.
		"""
		return 'Settings(floatx={!r}, backend={!r})'.format(
			self.floatx, self.backend)

	###########################################################################
	def get_backend(self):
		""" Returns the backend, creating it on first use.
		"""
		if self._backend is None:
			self._backend = Backend.from_specification(self.backend)
		return self._backend

	###########################################################################
	@classmethod
	def from_dict(cls, data):
		""" Creates settings from a dictionary, such as the "settings" section
			of a model file.
		"""
		if data is None:
			return cls()
		if not isinstance(data, dict):
			raise ParsingError('Settings must be a dictionary. Received: {}'
				.format(data))

		unknown = set(data) - {'floatx', 'backend'}
		if unknown:
			raise ParsingError('Unknown settings: {}'.format(
				', '.join(sorted(unknown))))

		return cls(floatx=data.get('floatx'), backend=data.get('backend'))

	###########################################################################
	@classmethod
	def from_file(cls, filename):
		""" Loads settings from a YAML file.

			The file may hold the settings at its top level, or under a
			"settings" key (so a model file can be passed directly).
		"""
		logger.debug('Loading settings from: %s', filename)
		with open(filename) as fh:
			data = yaml.safe_load(fh)

		if isinstance(data, dict) and 'settings' in data:
			data = data['settings']
		return cls.from_dict(data)

	###########################################################################
	@classmethod
	def from_environment(cls, environ=None):
		""" Creates settings from the KLAYERS_FLOATX and KLAYERS_BACKEND
			environmental variables.
		"""
		environ = os.environ if environ is None else environ
		return cls(
			floatx=environ.get(cls.ENV_FLOATX) or None,
			backend=environ.get(cls.ENV_BACKEND) or None
		)

	###########################################################################
	@classmethod
	def from_backend(cls, backend):
		""" Creates settings which use the backend's own default float type.

			# Arguments

			backend: Backend instance or specification.
		"""
		backend = Backend.from_specification(backend)
		floatx = backend.floatx()
		logger.debug('Using the backend float type: %s', floatx)
		return cls(floatx=floatx, backend=backend)

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
