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

import re
import logging
from collections import OrderedDict

import numpy

from ..errors import ConversionError, InvalidArgumentError
from ..shape import normalize_shape
from ..utils import get_subclasses

logger = logging.getLogger(__name__)

###############################################################################
def as_boolean(value, name):
	""" Checks that a flag really is a boolean.
	"""
	if isinstance(value, (bool, numpy.bool_)):
		return bool(value)
	raise ConversionError('"{}" must be a boolean. Received: {!r}'
		.format(name, value))

###############################################################################
class Layer:
	""" Base class for layer parameter records.

		A record holds the validated, coerced constructor arguments for one
		framework layer. Records are checked when they are created, so by the
		time `build()` is called the framework only ever sees arguments of the
		right type.

		# Subclassing

		- The class name is the framework's class name for the layer
			(override `get_layer_name()` if it is not).
		- `_get_params()` returns the layer-specific keyword arguments.
		- `PRIMARY` names the argument that a bare scalar maps to in model
			files, and `FILE_SUPPORTED` is False for layers which cannot be
			described in a model file at all.
	"""

	PRIMARY = None
	FILE_SUPPORTED = True

	###########################################################################
	@classmethod
	def get_layer_name(cls):
		""" Returns the framework's class name for this layer.
		"""
		return cls.__name__

	###########################################################################
	@classmethod
	def get_layer_key(cls):
		""" Returns the key used for this layer in model files.

			This is the snake-case version of the layer name, e.g.,
			"repeat_vector" for RepeatVector.
		"""
		return re.sub(r'(?<!^)(?=[A-Z])', '_', cls.get_layer_name()).lower()

	###########################################################################
	@staticmethod
	def get_all_layers():
		""" Iterates over all layer record classes.
		"""
		yield from get_subclasses(Layer)

	###########################################################################
	@staticmethod
	def get_layer_by_key(key):
		""" Finds a layer record class by its model-file key.
		"""
		for cls in Layer.get_all_layers():
			if cls.get_layer_key() == key:
				return cls
		raise ValueError('No such layer: {}'.format(key))

	###########################################################################
	def __init__(self, name=None, input_shape=None):
		""" Creates a new layer record.

			# Arguments

			name: str or None (default: None). The layer name. None lets the
				framework generate one.
			input_shape: shape-like or None (default: None). The input shape,
				not including the batch axis. Only needed for the first layer
				of a sequential model.
		"""
		if name is not None and not isinstance(name, str):
			raise InvalidArgumentError('Layer names must be strings. '
				'Received: {!r}'.format(name))
		self.name = name
		self.input_shape = normalize_shape(input_shape, name='input_shape')

	###########################################################################
	def __repr__(self):
		""" Return a string representation.
		"""
		return '{type}({params})'.format(
			type=self.__class__.__name__,
			params=', '.join(
				'{}={!r}'.format(k, v) for k, v in self.get_params().items()
			)
		)

	###########################################################################
	def _get_params(self):
		""" Returns the layer-specific constructor arguments.
		"""
		return OrderedDict()

	###########################################################################
	def get_params(self):
		""" Returns the keyword arguments for the framework constructor.

			An absent input shape is left out entirely rather than passed as
			None, since its absence is what tells the framework that this
			layer is not the first in a model.
		"""
		params = self._get_params()
		if self.input_shape is not None:
			params['input_shape'] = self.input_shape
		if self.name is not None:
			params['name'] = self.name
		return params

	###########################################################################
	def build(self, backend):
		""" Constructs the framework layer.

			# Arguments

			backend: Backend instance.

			# Return value

			The framework layer (or tensor, for Input layers).
		"""
		logger.debug('Building %s layer%s.', self.get_layer_name(),
			' "{}"'.format(self.name) if self.name else '')
		return backend.create_layer(self.get_layer_name(), **self.get_params())

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
