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
from ..shape import normalize_shape

###############################################################################
class Reshape(Layer):					# pylint: disable=too-few-public-methods
	""" Reshapes its input. The batch axis is left alone.

		Output shape: `(batch_size,) + target_shape`.
	"""

	PRIMARY = 'target_shape'

	###########################################################################
	def __init__(self, target_shape, input_shape=None, name=None):
		""" Creates a new reshape record.
		"""
		super().__init__(name=name, input_shape=input_shape)
		if target_shape is None:
			raise InvalidArgumentError('Reshape layers require a '
				'"target_shape".')
		self.target_shape = normalize_shape(target_shape, name='target_shape')

	###########################################################################
	def _get_params(self):
		""" Returns the constructor arguments.
		"""
		return OrderedDict([
			('target_shape', self.target_shape)
		])

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
