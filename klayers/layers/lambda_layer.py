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
class Lambda(Layer):					# pylint: disable=too-few-public-methods
	""" Wraps an arbitrary function as a layer.

		Lambda layers hold Python code, so they cannot appear in model files.
	"""

	FILE_SUPPORTED = False

	###########################################################################
	def __init__(self, f, output_shape=None, mask=None, arguments=None,
		input_shape=None, name=None):
		""" Creates a new lambda record.

			# Arguments

			f: callable. The function to evaluate. It takes the input tensor
				as its first argument.
			output_shape: shape-like, callable or None. The output shape (not
				including the batch axis), or a function computing it from the
				input shape. None lets the framework infer it.
			mask: a mask, a callable computing one, or None.
			arguments: dict or None. Extra keyword arguments for `f`.
			input_shape: shape-like or None.
			name: str or None.
		"""
		super().__init__(name=name, input_shape=input_shape)

		if not callable(f):
			raise InvalidArgumentError('Lambda layers require a callable. '
				'Received: {!r}'.format(f))
		self.function = f

		if callable(output_shape):
			self.output_shape = output_shape
		else:
			self.output_shape = normalize_shape(
				output_shape, name='output_shape')

		if arguments is not None and not isinstance(arguments, dict):
			raise InvalidArgumentError('"arguments" in Lambda layer must be a '
				'dictionary. Received: {!r}'.format(arguments))
		self.mask = mask
		self.arguments = arguments

	###########################################################################
	def _get_params(self):
		""" Returns the constructor arguments.
		"""
		return OrderedDict([
			('function', self.function),
			('output_shape', self.output_shape),
			('mask', self.mask),
			('arguments', self.arguments)
		])

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
