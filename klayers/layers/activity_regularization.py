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
from ..shape import as_float

###############################################################################
class ActivityRegularization(Layer):	# pylint: disable=too-few-public-methods
	""" Adds a penalty on the input activity to the cost function. The
		output is the input, unchanged.
	"""

	###########################################################################
	def __init__(self, l1=0.0, l2=0.0, input_shape=None, name=None):
		""" Creates a new activity regularization record.
		"""
		super().__init__(name=name, input_shape=input_shape)
		self.l1 = as_float(l1, name='l1')
		self.l2 = as_float(l2, name='l2')
		for key in ('l1', 'l2'):
			if getattr(self, key) < 0:
				raise InvalidArgumentError('"{}" regularization factor must '
					'be >= 0. Received: {}'.format(key, getattr(self, key)))

	###########################################################################
	def _get_params(self):
		""" Returns the constructor arguments.
		"""
		return OrderedDict([
			('l1', self.l1),
			('l2', self.l2)
		])

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
