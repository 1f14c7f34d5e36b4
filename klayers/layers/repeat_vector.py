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
from ..shape import as_integer

###############################################################################
class RepeatVector(Layer):				# pylint: disable=too-few-public-methods
	""" Repeats a flat input a fixed number of times.

		Input shape: `(num_samples, features)`.
		Output shape: `(num_samples, n, features)`.
	"""

	PRIMARY = 'n'

	###########################################################################
	def __init__(self, n, name=None):
		""" Creates a new repeat record.
		"""
		super().__init__(name=name)
		self.n = as_integer(n, name='n')
		if self.n < 1:
			raise InvalidArgumentError('"n" in RepeatVector layer must be '
				'>= 1. Received: {}'.format(self.n))

	###########################################################################
	def _get_params(self):
		""" Returns the constructor arguments.
		"""
		return OrderedDict([
			('n', self.n)
		])

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
