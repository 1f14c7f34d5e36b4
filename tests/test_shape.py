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

import collections

import numpy
import pytest

from klayers import ConversionError
from klayers.shape import normalize_shape, as_integer, as_nullable_integer, \
	as_integer_tuple, as_float

###############################################################################
@pytest.fixture(
	params=[
		[32],
		[None, 32],
		(10, 32),
		[3.0, 4.9],
		['7', None, 2],
		numpy.array([5, 6]),
		[numpy.int64(2), numpy.float32(3.5)],
		[-1, 4],
		[]
	]
)
def a_shape(request):
	return request.param

###############################################################################
class TestNormalizeShape:
	""" Tests for shape normalization.
	"""

	###########################################################################
	def test_absent(self):
		""" None stays None, and is never turned into an empty shape.
		"""
		assert normalize_shape(None) is None

	###########################################################################
	def test_unknown_dimension(self):
		""" None entries mark unknown dimensions and are kept in place.
		"""
		assert normalize_shape([None, 32]) == (None, 32)
		assert normalize_shape([16, None, 3]) == (16, None, 3)

	###########################################################################
	def test_idempotent(self, a_shape):
		""" Normalizing twice is the same as normalizing once.
		"""
		once = normalize_shape(a_shape)
		assert normalize_shape(once) == once

	###########################################################################
	def test_canonical_form(self, a_shape):
		""" The result is a tuple of ints and Nones.
		"""
		result = normalize_shape(a_shape)
		assert isinstance(result, tuple)
		for value in result:
			assert value is None or type(value) is int	# pylint: disable=unidiomatic-typecheck

	###########################################################################
	def test_coercion(self):
		""" Floats are truncated, and numeric strings are accepted.
		"""
		assert normalize_shape([3.0, 4.9]) == (3, 4)
		assert normalize_shape(['7', '2.5']) == (7, 2)
		assert normalize_shape(numpy.array([5, 6])) == (5, 6)

	###########################################################################
	def test_scalar(self):
		""" A single dimension becomes a one-element shape.
		"""
		assert normalize_shape(32) == (32, )
		assert normalize_shape(numpy.int32(8)) == (8, )

	###########################################################################
	def test_empty(self):
		""" An empty shape is not the same as no shape.
		"""
		assert normalize_shape([]) == ()
		assert normalize_shape(()) is not None

	###########################################################################
	def test_negative_allowed(self):
		""" Negative dimensions are left for the framework to judge.
		"""
		assert normalize_shape([-1, 4]) == (-1, 4)

	###########################################################################
	def test_other_sequences(self):
		""" Any ordered sequence of dimensions is accepted.
		"""
		assert normalize_shape(range(1, 3)) == (1, 2)
		assert normalize_shape(collections.deque([None, 4])) == (None, 4)
		assert normalize_shape(x for x in (3, 5.0)) == (3, 5)

	###########################################################################
	@pytest.mark.parametrize('unordered', [{4: 2}, {4}])
	def test_unordered_rejected(self, unordered):
		""" Mappings and sets have no dimension order.
		"""
		with pytest.raises(ConversionError):
			normalize_shape(unordered)

	###########################################################################
	@pytest.mark.parametrize('bad', [
		['abc'], [32, 'x'], [float('nan')], [float('inf')], [object()], [[1]]
	])
	def test_bad_values(self, bad):
		""" Non-numeric values raise a ConversionError.
		"""
		with pytest.raises(ConversionError):
			normalize_shape(bad)

	###########################################################################
	def test_error_message(self):
		""" Errors name the argument.
		"""
		with pytest.raises(ConversionError) as excinfo:
			normalize_shape(['abc'], name='target_shape')
		assert 'target_shape' in str(excinfo.value)

	###########################################################################
	def test_conversion_error_is_value_error(self):
		""" ConversionErrors can be caught as ValueErrors.
		"""
		with pytest.raises(ValueError):
			normalize_shape(['abc'])

###############################################################################
class TestScalarCoercion:
	""" Tests for the scalar coercion helpers.
	"""

	###########################################################################
	def test_as_integer(self):
		""" Integer coercion truncates toward zero.
		"""
		assert as_integer(3) == 3
		assert as_integer(3.9) == 3
		assert as_integer(-3.9) == -3
		assert as_integer('12') == 12
		assert as_integer(numpy.int64(4)) == 4
		with pytest.raises(ConversionError):
			as_integer(None)
		with pytest.raises(ConversionError):
			as_integer('twelve')

	###########################################################################
	def test_as_nullable_integer(self):
		""" None is passed through.
		"""
		assert as_nullable_integer(None) is None
		assert as_nullable_integer(2.5) == 2

	###########################################################################
	def test_as_integer_tuple(self):
		""" Integer tuples reject None entries, unlike shapes.
		"""
		assert as_integer_tuple(None) is None
		assert as_integer_tuple([2, 1]) == (2, 1)
		assert as_integer_tuple(3) == (3, )
		with pytest.raises(ConversionError):
			as_integer_tuple([None, 1])

	###########################################################################
	def test_as_float(self):
		""" Float coercion accepts numbers and numeric strings only.
		"""
		assert as_float(1) == 1.0
		assert as_float('0.5') == 0.5
		for bad in (None, True, 'half', [1.0]):
			with pytest.raises(ConversionError):
				as_float(bad)

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
