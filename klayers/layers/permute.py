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

from collections import OrderedDict

from . import Layer
from ..errors import InvalidArgumentError
from ..shape import as_integer_tuple

###############################################################################
class Permute(Layer):					# pylint: disable=too-few-public-methods
	""" Re-orders the dimensions of its input.

		# Usage

		`dims=(2, 1)` swaps the first and second (non-batch) dimensions.
		Indexing starts at 1, since the batch axis is never permuted.
	"""

	PRIMARY = 'dims'

	###########################################################################
	def __init__(self, dims, input_shape=None, name=None):
		""" Creates a new permute record.
		"""
		super().__init__(name=name, input_shape=input_shape)
		if dims is None:
			raise InvalidArgumentError('Permute layers require "dims".')

		self.dims = as_integer_tuple(dims, name='dims')
		if not self.dims or \
			sorted(self.dims) != list(range(1, len(self.dims) + 1)):
			raise InvalidArgumentError('"dims" in Permute layer must be a '
				'permutation of 1, ..., n. Received: {}'.format(self.dims))

	###########################################################################
	def _get_params(self):
		""" Returns the constructor arguments.
		"""
		return OrderedDict([
			('dims', self.dims)
		])

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
