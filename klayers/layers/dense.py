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

from . import Layer, as_boolean
from ..errors import InvalidArgumentError
from ..shape import as_integer

###############################################################################
def resolve_activation(activation):
	""" Resolves an activation argument.

		None means no activation at all, which the framework calls "linear".
		Names and callables are passed through.
	"""
	if activation is None:
		return 'linear'
	if isinstance(activation, str) or callable(activation):
		return activation
	raise InvalidArgumentError('"activation" must be the name of an '
		'activation function, or a callable. Received: {!r}'
		.format(activation))

###############################################################################
class Dense(Layer):						# pylint: disable=too-few-public-methods
	""" A densely-connected layer: `activation(dot(input, kernel) + bias)`.
	"""

	PRIMARY = 'units'

	###########################################################################
	def __init__(self, units, activation=None, use_bias=True,
		kernel_initializer='glorot_uniform', bias_initializer='zeros',
		kernel_regularizer=None, bias_regularizer=None,
		activity_regularizer=None, kernel_constraint=None,
		bias_constraint=None, input_shape=None, name=None):
		""" Creates a new dense record.

			# Arguments

			units: int. Dimensionality of the output space.
			activation: str, callable or None. None applies no activation.
			use_bias: bool (default: True). Whether the layer has a bias
				vector.
			kernel_initializer, bias_initializer: initializers for the weights
				and the bias.
			kernel_regularizer, bias_regularizer, activity_regularizer:
				regularizers for the weights, the bias and the output.
			kernel_constraint, bias_constraint: constraints for the weights
				and the bias.
			input_shape: shape-like or None. Only needed for the first layer
				in a model.
			name: str or None. The layer name.
		"""
		super().__init__(name=name, input_shape=input_shape)

		self.units = as_integer(units, name='units')
		if self.units < 1:
			raise InvalidArgumentError('"units" in Dense layer must be >= 1. '
				'Received: {}'.format(self.units))

		self.activation = resolve_activation(activation)
		self.use_bias = as_boolean(use_bias, 'use_bias')
		self.kernel_initializer = kernel_initializer
		self.bias_initializer = bias_initializer
		self.kernel_regularizer = kernel_regularizer
		self.bias_regularizer = bias_regularizer
		self.activity_regularizer = activity_regularizer
		self.kernel_constraint = kernel_constraint
		self.bias_constraint = bias_constraint

	###########################################################################
	def _get_params(self):
		""" Returns the constructor arguments.
		"""
		return OrderedDict([
			('units', self.units),
			('activation', self.activation),
			('use_bias', self.use_bias),
			('kernel_initializer', self.kernel_initializer),
			('bias_initializer', self.bias_initializer),
			('kernel_regularizer', self.kernel_regularizer),
			('bias_regularizer', self.bias_regularizer),
			('activity_regularizer', self.activity_regularizer),
			('kernel_constraint', self.kernel_constraint),
			('bias_constraint', self.bias_constraint)
		])

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
