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
from ..shape import as_float

###############################################################################
class Masking(Layer):					# pylint: disable=too-few-public-methods
	""" Skips timesteps whose values all equal `mask_value`.

		Every downstream layer must support masking, or the framework will
		raise an error.
	"""

	PRIMARY = 'mask_value'

	###########################################################################
	def __init__(self, mask_value=0.0, input_shape=None, name=None):
		""" Creates a new masking record.
		"""
		super().__init__(name=name, input_shape=input_shape)
		self.mask_value = as_float(mask_value, name='mask_value')

	###########################################################################
	def _get_params(self):
		""" Returns the constructor arguments.
		"""
		return OrderedDict([
			('mask_value', self.mask_value)
		])

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
