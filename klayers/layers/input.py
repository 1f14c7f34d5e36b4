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
from collections import OrderedDict

from . import Layer, as_boolean
from ..errors import InvalidArgumentError
from ..shape import normalize_shape

logger = logging.getLogger(__name__)

###############################################################################
class Input(Layer):						# pylint: disable=too-few-public-methods
	""" An entry point into a graph.

		Building an Input produces a tensor rather than a layer, so Input
		records are never composed with anything.
	"""

	PRIMARY = 'shape'

	###########################################################################
	def __init__(self, shape=None, batch_shape=None, name=None, dtype=None,
		sparse=False, tensor=None):
		""" Creates a new input record.

			# Arguments

			shape: shape-like or None. The shape, not including the batch
				size. `shape=[32]` means batches of 32-dimensional vectors.
			batch_shape: shape-like or None. The shape, including the batch
				size. `batch_shape=[None, 32]` means batches of any number of
				32-dimensional vectors.
			name: str or None. The layer name.
			dtype: str or None. The data type of the input. This should have
				been resolved against the settings by the time the record is
				built.
			sparse: bool (default: False). Whether the placeholder is sparse.
			tensor: an existing tensor to wrap, or None.
		"""
		super().__init__(name=name)
		self.shape = normalize_shape(shape, name='shape')
		self.batch_shape = normalize_shape(batch_shape, name='batch_shape')

		if dtype is not None and not isinstance(dtype, str):
			raise InvalidArgumentError('"dtype" must be a string. Received: '
				'{!r}'.format(dtype))
		self.dtype = dtype
		self.sparse = as_boolean(sparse, 'sparse')
		self.tensor = tensor

		if self.shape == ():
			logger.debug('Input "%s" has an empty (scalar) shape.',
				self.name or '(unnamed)')

	###########################################################################
	def _get_params(self):
		""" Returns the constructor arguments.
		"""
		return OrderedDict([
			('shape', self.shape),
			('batch_shape', self.batch_shape),
			('dtype', self.dtype),
			('sparse', self.sparse),
			('tensor', self.tensor)
		])

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
