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

import logging

from ..utils import get_subclasses

logger = logging.getLogger(__name__)

###############################################################################
class Backend:
	""" Base class for the deep learning frameworks that layers are built
		with.

		A backend is the only place where klayers touches the framework. It
		knows how to construct a layer given its class name and keyword
		arguments, and how to tell sequential models and tensors apart from
		everything else.
	"""

	###########################################################################
	def __init__(self):
		""" Create a new backend.

			Part of this call should be to ensure that all the necessary
			modules/libraries are available to use this backend. If this
			backend cannot be used, an exception should be raised.
		"""
		if not self.is_supported():
			logger.warning('Backend claims to not be supported. We will try '
				'to use it anyway.')
		logger.debug('Creating backend: %s', self.get_name())

	###########################################################################
	def __repr__(self):
		""" Return a string representation.
		"""
		return '{}()'.format(self.__class__.__name__)

	###########################################################################
	@classmethod
	def get_name(cls):
		""" Returns the name of the backend class.

			This is the name used in settings (e.g., `backend: keras`). By
			default it is the lower-cased class name without a trailing
			"backend".
		"""
		name = cls.__name__.lower()
		if name.endswith('backend'):
			name = name[:-len('backend')]
		return name

	###########################################################################
	@classmethod
	def is_supported(cls):
		""" Returns True if this backend can be used.

			Note that if this returns False, then the backend should definitely
			not be able to be used. However, just because it returns True
			doesn't mean it will work.
		"""
		raise NotImplementedError

	###########################################################################
	def floatx(self):
		""" Returns the framework's default floating-point type, as a string.
		"""
		raise NotImplementedError

	###########################################################################
	def create_layer(self, layer_name, **kwargs):
		""" Constructs a framework layer.

			# Arguments

			layer_name: str. The framework's class name for the layer (e.g.,
				"Dense").
			kwargs: dict. The constructor arguments.

			# Return value

			The new (unconnected) layer object.
		"""
		raise NotImplementedError

	###########################################################################
	def create_sequential(self, name=None):
		""" Creates a new, empty sequential model.
		"""
		raise NotImplementedError

	###########################################################################
	def is_sequential(self, x):
		""" Returns True if `x` is a sequential model that layers can be
			appended to.
		"""
		raise NotImplementedError

	###########################################################################
	def is_tensor(self, x):
		""" Returns True if `x` is a tensor that a layer can be called on.
		"""
		raise NotImplementedError

	###########################################################################
	@staticmethod
	def from_specification(spec):
		""" Creates a new backend from the specification.

			# Arguments

			spec: None, str, dict or Backend. The backend specification.

			# Return value

			Backend instance

			# Usage

			If the specification is None, the first supported backend
			installed on the system is used.

			Instantiate a specific backend with default parameters:
			```yaml
			settings:
			  backend: keras
			```
			or like this:
			```yaml
			settings:
			  backend:
			    name: keras
			```

			Any other keys are passed to the backend's constructor:
			```yaml
			settings:
			  backend:
			    name: keras
			    PARAM1: VALUE1
			```
		"""
		if isinstance(spec, Backend):
			return spec

		if spec is None:
			target = Backend.get_default_backend()
			params = {}
		elif isinstance(spec, str):
			target = Backend.get_backend_by_name(spec)
			params = {}
		elif isinstance(spec, dict):
			params = dict(spec)
			if 'name' in params:
				target = Backend.get_backend_by_name(params.pop('name'))
			else:
				target = Backend.get_default_backend()
		else:
			raise ValueError(
				'Unexpected backend specification: {}'.format(spec))

		logger.debug('Using backend: %s', target.get_name())
		return target(**params)

	###########################################################################
	@staticmethod
	def get_default_backend():
		""" Returns the first supported backend class.
		"""
		all_supported = list(Backend.get_all_backends(supported_only=True))
		if not all_supported:
			raise ValueError('No supported backends available. Is Keras '
				'installed?')
		return all_supported[0]

	###########################################################################
	@staticmethod
	def get_backend_by_name(name):
		""" Finds the backend class with the given name.

			# Arguments

			name: str. The name of the backend, as given by its `get_name()`
				method.

			# Return value

			If the named backend is found, this returns its class; otherwise,
			a ValueError is raised.
		"""
		name = name.lower()
		for cls in Backend.get_all_backends(supported_only=False):
			if cls.get_name() == name:
				return cls
		raise ValueError('No such backend: {}'.format(name))

	###########################################################################
	@staticmethod
	def get_all_backends(supported_only=False):
		""" Iterates over the backend classes.

			# Arguments

			supported_only: bool (default: False). If True, only backends
				which claim to be usable on this system are produced.
		"""
		for cls in get_subclasses(Backend):
			if supported_only:
				if cls.is_supported():
					yield cls
			else:
				yield cls

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
