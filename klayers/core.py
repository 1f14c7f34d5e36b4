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

from . import layers
from .compose import call_layer
from .settings import Settings

logger = logging.getLogger(__name__)

###############################################################################
def layer_input(shape=None, batch_shape=None, name=None, dtype=None,
	sparse=False, tensor=None, settings=None):
	""" Creates an entry point into a graph.

		# Arguments

		shape: shape-like or None. The shape, not including the batch size.
			`shape=[32]` means batches of 32-dimensional vectors.
		batch_shape: shape-like or None. The shape, including the batch size.
			`batch_shape=[10, 32]` means batches of 10 32-dimensional vectors;
			`batch_shape=[None, 32]` means any number of them.
		name: str or None. An optional name for the layer.
		dtype: str or None. The data type expected by the input ("float32",
			"int32", ...). None uses `settings.floatx`.
		sparse: bool (default: False). Whether the placeholder is sparse.
		tensor: an existing tensor to wrap. If set, no placeholder is created.
		settings: Settings or None. None uses the defaults.

		# Return value

		A tensor.
	"""
	settings = settings or Settings()
	if dtype is None:
		dtype = settings.floatx
		logger.trace('No dtype given for input; using %s.', dtype)

	record = layers.Input(
		shape=shape,
		batch_shape=batch_shape,
		name=name,
		dtype=dtype,
		sparse=sparse,
		tensor=tensor
	)
	return record.build(settings.get_backend())

###############################################################################
def layer_dense(x, units, activation=None, use_bias=True,
	kernel_initializer='glorot_uniform', bias_initializer='zeros',
	kernel_regularizer=None, bias_regularizer=None, activity_regularizer=None,
	kernel_constraint=None, bias_constraint=None, input_shape=None, name=None,
	settings=None):
	""" Adds a densely-connected layer to an output.

		Implements `output = activation(dot(input, kernel) + bias)`. If the
		input has a rank greater than 2, it is flattened before the dot
		product.

		# Arguments

		x: None, a sequential model, or a tensor.
		units: int. Dimensionality of the output space.
		activation: str, callable or None. None means no activation ("linear").
		use_bias: bool (default: True). Whether the layer uses a bias vector.
		kernel_initializer: initializer for the kernel weights matrix.
		bias_initializer: initializer for the bias vector.
		kernel_regularizer: regularizer applied to the kernel.
		bias_regularizer: regularizer applied to the bias.
		activity_regularizer: regularizer applied to the layer output.
		kernel_constraint: constraint applied to the kernel.
		bias_constraint: constraint applied to the bias.
		input_shape: shape-like or None. Dimensionality of the input, not
			including the samples axis. Required for the first layer of a
			model.
		name: str or None. An optional name for the layer.
		settings: Settings or None. None uses the defaults.

		# Return value

		The layer if `x` is None, the model if `x` is a sequential model, or
		the output tensor if `x` is a tensor.
	"""
	return call_layer(layers.Dense(
		units=units,
		activation=activation,
		use_bias=use_bias,
		kernel_initializer=kernel_initializer,
		bias_initializer=bias_initializer,
		kernel_regularizer=kernel_regularizer,
		bias_regularizer=bias_regularizer,
		activity_regularizer=activity_regularizer,
		kernel_constraint=kernel_constraint,
		bias_constraint=bias_constraint,
		input_shape=input_shape,
		name=name
	), x, settings)

###############################################################################
def layer_reshape(x, target_shape, input_shape=None, name=None,
	settings=None):
	""" Reshapes an output to a certain shape.

		# Arguments

		target_shape: shape-like. Does not include the batch axis.
	"""
	return call_layer(layers.Reshape(
		target_shape=target_shape,
		input_shape=input_shape,
		name=name
	), x, settings)

###############################################################################
def layer_permute(x, dims, input_shape=None, name=None, settings=None):
	""" Permutes the dimensions of an input according to a given pattern.

		# Arguments

		dims: list of ints. The permutation pattern, not including the batch
			axis. Indexing starts at 1, so `(2, 1)` swaps the first and second
			dimensions.

		# Notes

		Useful for e.g. connecting RNNs and convnets together.
	"""
	return call_layer(layers.Permute(
		dims=dims,
		input_shape=input_shape,
		name=name
	), x, settings)

###############################################################################
def layer_repeat_vector(x, n, name=None, settings=None):
	""" Repeats a 2D input `n` times, producing `(num_samples, n, features)`.
	"""
	return call_layer(layers.RepeatVector(n=n, name=name), x, settings)

###############################################################################
def layer_lambda(x, f, output_shape=None, mask=None, arguments=None,
	input_shape=None, name=None, settings=None):
	""" Wraps an arbitrary expression as a layer.

		# Arguments

		f: callable. The function to evaluate; takes the input tensor as its
			first argument.
		output_shape: shape-like, callable or None. None lets the framework
			infer the output shape.
		mask: the mask, or None.
		arguments: dict or None. Keyword arguments passed on to `f`.
	"""
	return call_layer(layers.Lambda(
		f=f,
		output_shape=output_shape,
		mask=mask,
		arguments=arguments,
		input_shape=input_shape,
		name=name
	), x, settings)

###############################################################################
def layer_activity_regularization(x, l1=0.0, l2=0.0, input_shape=None,
	name=None, settings=None):
	""" Applies an update to the cost function based on input activity.

		# Arguments

		l1: float (default: 0). L1 regularization factor.
		l2: float (default: 0). L2 regularization factor.
	"""
	return call_layer(layers.ActivityRegularization(
		l1=l1,
		l2=l2,
		input_shape=input_shape,
		name=name
	), x, settings)

###############################################################################
def layer_masking(x, mask_value=0.0, input_shape=None, name=None,
	settings=None):
	""" Masks a sequence by using a mask value to skip timesteps.

		For each timestep, if all values at that timestep are equal to
		`mask_value`, the timestep is masked (skipped) in all downstream
		layers.
	"""
	return call_layer(layers.Masking(
		mask_value=mask_value,
		input_shape=input_shape,
		name=name
	), x, settings)

###############################################################################
def layer_flatten(x, name=None, settings=None):
	""" Flattens an input. Does not affect the batch size.
	"""
	return call_layer(layers.Flatten(name=name), x, settings)

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
