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

import enum
import logging

from .errors import InvalidArgumentError
from .settings import Settings

logger = logging.getLogger(__name__)

###############################################################################
class GraphPosition(enum.Enum):
	""" Where in a graph a new layer is being attached.

		- ABSENT: nothing was given; the layer stands alone.
		- SEQUENTIAL: a sequential model, which the layer is appended to.
		- TENSOR: a tensor, which the layer is called on.
	"""

	ABSENT = 'absent'
	SEQUENTIAL = 'sequential'
	TENSOR = 'tensor'

	###########################################################################
	@classmethod
	def from_value(cls, x, backend):
		""" Classifies `x`.

			# Arguments

			x: the caller's model, tensor or None.
			backend: Backend instance. Used to recognize models and tensors.

			# Return value

			A GraphPosition member.

			# Exceptions

			Raises an InvalidArgumentError if `x` is none of the above.
		"""
		if x is None:
			return cls.ABSENT
		# Sequential models are callable too, so they must be checked first.
		if backend.is_sequential(x):
			return cls.SEQUENTIAL
		if backend.is_tensor(x):
			return cls.TENSOR
		raise InvalidArgumentError('Invalid input to layer function (must be '
			'a model or a tensor). Received: {}'.format(type(x).__name__))

###############################################################################
def compose_layer(x, layer, backend):
	""" Attaches a freshly constructed layer to `x`.

		# Arguments

		x: None, a sequential model, or a tensor.
		layer: the framework layer.
		backend: Backend instance.

		# Return value

		- If `x` is None, the layer itself.
		- If `x` is a sequential model, the same model, with `layer` appended.
		- If `x` is a tensor, the tensor produced by calling `layer` on `x`.
	"""
	position = GraphPosition.from_value(x, backend)

	if position is GraphPosition.ABSENT:
		return layer

	if position is GraphPosition.SEQUENTIAL:
		logger.debug('Adding %s to sequential model.', layer)
		x.add(layer)
		return x

	logger.debug('Applying %s to tensor.', layer)
	return layer(x)

###############################################################################
def call_layer(record, x, settings=None):
	""" Builds the layer described by a parameter record and composes it
		with `x`.

		# Arguments

		record: Layer instance. The validated layer parameters.
		x: None, a sequential model, or a tensor.
		settings: Settings or None (default: None). None uses the defaults.
	"""
	settings = settings or Settings()
	backend = settings.get_backend()
	layer = record.build(backend)
	return compose_layer(x, layer, backend)

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
