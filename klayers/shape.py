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

import math
import logging
import collections.abc

import numpy

from .errors import ConversionError

logger = logging.getLogger(__name__)

###############################################################################
def _describe(name):
	""" Names an argument for use in error messages.
	"""
	return '"{}"'.format(name) if name else 'Value'

###############################################################################
def _as_sequence(value):
	""" Turns shape-like input into a list. Scalars become one-element lists.
	"""
	if isinstance(value, numpy.ndarray):
		return value.tolist() if value.ndim else [value.item()]
	if isinstance(value, (str, bytes, collections.abc.Mapping,
		collections.abc.Set)):
		return [value]
	if isinstance(value, collections.abc.Iterable):
		return list(value)
	return [value]


###############################################################################
def as_integer(value, name=None):
	""" Coerces a scalar to an integer.

		Floats are truncated toward zero, and numeric strings are accepted
		("3" and "3.7" both become 3).

		# Arguments

		value: the value to coerce.
		name: str or None (default: None). The argument name, used in error
			messages.

		# Return value

		An `int`.

		# Exceptions

		Raises a ConversionError if the value is not numeric, or is NaN or
		infinite.
	"""
	if isinstance(value, (int, numpy.integer)):
		return int(value)

	try:
		if isinstance(value, str):
			try:
				return int(value)
			except ValueError:
				value = float(value)
		if isinstance(value, (float, numpy.floating)) and \
			not math.isfinite(value):
			raise ValueError('not a finite number')
		return int(value)
	except (TypeError, ValueError, OverflowError):
		raise ConversionError('{} must be an integer. Received: {!r}'
			.format(_describe(name), value))

###############################################################################
def as_nullable_integer(value, name=None):
	""" Like `as_integer()`, but None is passed through.
	"""
	if value is None:
		return None
	return as_integer(value, name=name)

###############################################################################
def as_integer_tuple(values, name=None):
	""" Coerces a list of integers to a tuple.

		# Arguments

		values: None, a scalar, or a sequence of integer-like values.
		name: str or None (default: None). The argument name, used in error
			messages.

		# Return value

		None if `values` is None; otherwise a tuple of ints. Unlike shapes, no
		element may be None.
	"""
	if values is None:
		return None
	return tuple(as_integer(v, name=name) for v in _as_sequence(values))

###############################################################################
def as_float(value, name=None):
	""" Coerces a scalar to a float.
	"""
	if isinstance(value, bool) or value is None:
		raise ConversionError('{} must be a floating-point number. '
			'Received: {!r}'.format(_describe(name), value))
	try:
		return float(value)
	except (TypeError, ValueError):
		raise ConversionError('{} must be a floating-point number. '
			'Received: {!r}'.format(_describe(name), value))

###############################################################################
def normalize_shape(shape, name=None):
	""" Coerces a shape argument into the tuple form Keras expects.

		# Arguments

		shape: None, a single dimension, or an ordered sequence of dimensions
			(list, tuple, range, numpy array, TensorShape and so on). A None dimension is left unconstrained, which
			is how a variable batch size is expressed in a batch shape.
		name: str or None (default: None). The argument name, used in error
			messages.

		# Return value

		None if `shape` is None. This is not the same as an empty shape, and
		must not be turned into one. Otherwise, a tuple whose entries are all
		ints or None.

		# Exceptions

		Raises a ConversionError if any dimension cannot be coerced to an
		integer.

		# Notes

		No range check is applied. `(-1, 4)` is a perfectly good target shape
		for a Reshape layer.
	"""
	if shape is None:
		return None

	result = tuple(
		as_nullable_integer(value, name=name)
		for value in _as_sequence(shape)
	)
	logger.trace('Normalized %s: %r -> %r', name or 'shape', shape, result)
	return result

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
