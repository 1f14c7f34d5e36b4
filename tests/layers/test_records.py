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

import pytest

from klayers import ConversionError, InvalidArgumentError
from klayers.layers import Layer, Input, Dense, Reshape, Permute, \
	RepeatVector, Lambda, ActivityRegularization, Masking, Flatten

###############################################################################
class TestRegistry:
	""" Tests for looking up layer records.
	"""

	###########################################################################
	def test_keys(self):
		""" Model-file keys are the snake-case class names.
		"""
		assert RepeatVector.get_layer_key() == 'repeat_vector'
		assert ActivityRegularization.get_layer_key() == \
			'activity_regularization'
		assert Input.get_layer_key() == 'input'

	###########################################################################
	def test_lookup(self):
		""" Every record can be found by its key.
		"""
		for cls in (Input, Dense, Reshape, Permute, RepeatVector, Lambda,
			ActivityRegularization, Masking, Flatten):
			assert Layer.get_layer_by_key(cls.get_layer_key()) is cls
		with pytest.raises(ValueError):
			Layer.get_layer_by_key('convolution')

###############################################################################
class TestCommon:
	""" Tests for behavior shared by all records.
	"""

	###########################################################################
	def test_input_shape_omitted(self):
		""" An absent input shape is left out of the arguments entirely.
		"""
		assert 'input_shape' not in Dense(units=3).get_params()
		assert Dense(units=3, input_shape=[None, 5]).get_params()[
			'input_shape'] == (None, 5)

	###########################################################################
	def test_name(self):
		""" Names are passed on only when given, and must be strings.
		"""
		assert 'name' not in Flatten().get_params()
		assert Flatten(name='flat').get_params()['name'] == 'flat'
		with pytest.raises(InvalidArgumentError):
			Flatten(name=3)

	###########################################################################
	def test_build(self, fake_backend):
		""" Building passes the record's arguments to the backend.
		"""
		layer = Masking(mask_value=-1).build(fake_backend)
		assert fake_backend.created == [('Masking', {'mask_value' : -1.0})]
		assert layer.layer_name == 'Masking'

###############################################################################
class TestInput:
	""" Tests for Input records.
	"""

	###########################################################################
	def test_params(self):
		""" Both shapes are normalized, and absent ones stay absent.
		"""
		record = Input(shape=[32.0], dtype='int32')
		params = record.get_params()
		assert params['shape'] == (32, )
		assert params['batch_shape'] is None
		assert params['dtype'] == 'int32'
		assert params['sparse'] is False
		assert params['tensor'] is None

		record = Input(batch_shape=[None, 32])
		assert record.get_params()['batch_shape'] == (None, 32)
		assert record.get_params()['shape'] is None

	###########################################################################
	def test_validation(self):
		""" Flags and data types are checked.
		"""
		with pytest.raises(ConversionError):
			Input(shape=[3], sparse='yes')
		with pytest.raises(InvalidArgumentError):
			Input(shape=[3], dtype=32)

###############################################################################
class TestDense:
	""" Tests for Dense records.
	"""

	###########################################################################
	def test_defaults(self):
		""" The defaults are a linear activation with a bias.
		"""
		params = Dense(units=10).get_params()
		assert params['units'] == 10
		assert params['activation'] == 'linear'
		assert params['use_bias'] is True
		assert params['kernel_initializer'] == 'glorot_uniform'
		assert params['bias_initializer'] == 'zeros'

	###########################################################################
	def test_coercion(self):
		""" Units are coerced to integers.
		"""
		assert Dense(units=10.0).units == 10
		assert Dense(units='7').units == 7

	###########################################################################
	def test_activation(self):
		""" Activations may be names or callables.
		"""
		func = lambda x: x
		assert Dense(units=1, activation='relu').activation == 'relu'
		assert Dense(units=1, activation=func).activation is func
		with pytest.raises(InvalidArgumentError):
			Dense(units=1, activation=5)

	###########################################################################
	def test_validation(self):
		""" Bad units and flags are rejected.
		"""
		with pytest.raises(ConversionError):
			Dense(units='ten')
		with pytest.raises(InvalidArgumentError):
			Dense(units=0)
		with pytest.raises(ConversionError):
			Dense(units=1, use_bias=1)

###############################################################################
class TestShapedLayers:
	""" Tests for Reshape, Permute and RepeatVector records.
	"""

	###########################################################################
	def test_reshape(self):
		""" Target shapes are normalized, and are required.
		"""
		assert Reshape(target_shape=[2, 8.0]).target_shape == (2, 8)
		assert Reshape(target_shape=[-1, 4]).target_shape == (-1, 4)
		with pytest.raises(InvalidArgumentError):
			Reshape(target_shape=None)

	###########################################################################
	def test_permute(self):
		""" Permutation patterns are integer tuples of 1, ..., n.
		"""
		assert Permute(dims=[2, 1]).get_params()['dims'] == (2, 1)
		assert Permute(dims=[3.0, 1, 2]).dims == (3, 1, 2)
		for bad in ([0, 1], [1, 1], [], [2, 3]):
			with pytest.raises(InvalidArgumentError):
				Permute(dims=bad)
		with pytest.raises(ConversionError):
			Permute(dims=['a', 1])

	###########################################################################
	def test_repeat_vector(self):
		""" Repetition counts are positive integers.
		"""
		assert RepeatVector(n=3.0).get_params() == {'n' : 3}
		with pytest.raises(InvalidArgumentError):
			RepeatVector(n=0)
		with pytest.raises(ConversionError):
			RepeatVector(n='many')

###############################################################################
class TestLambda:
	""" Tests for Lambda records.
	"""

	###########################################################################
	def test_params(self):
		""" The function is passed on under the framework's name for it.
		"""
		func = lambda x: x * 2
		params = Lambda(f=func, output_shape=[4.0]).get_params()
		assert params['function'] is func
		assert params['output_shape'] == (4, )
		assert params['mask'] is None
		assert params['arguments'] is None

	###########################################################################
	def test_callable_output_shape(self):
		""" Output shapes may be functions of the input shape.
		"""
		shape_func = lambda shape: shape
		record = Lambda(f=abs, output_shape=shape_func)
		assert record.output_shape is shape_func

	###########################################################################
	def test_validation(self):
		""" The function must be callable, and arguments a dictionary.
		"""
		with pytest.raises(InvalidArgumentError):
			Lambda(f='x * 2')
		with pytest.raises(InvalidArgumentError):
			Lambda(f=abs, arguments=[1, 2])
		assert Lambda(f=abs, arguments={'a' : 1}).arguments == {'a' : 1}

###############################################################################
class TestScalarLayers:
	""" Tests for ActivityRegularization and Masking records.
	"""

	###########################################################################
	def test_activity_regularization(self):
		""" Regularization factors are non-negative floats.
		"""
		params = ActivityRegularization(l1=1, l2='0.5').get_params()
		assert params == {'l1' : 1.0, 'l2' : 0.5}
		with pytest.raises(InvalidArgumentError):
			ActivityRegularization(l1=-0.1)
		with pytest.raises(ConversionError):
			ActivityRegularization(l2='lots')

	###########################################################################
	def test_masking(self):
		""" Mask values are floats.
		"""
		assert Masking().get_params() == {'mask_value' : 0.0}
		assert Masking(mask_value=-1, input_shape=[None, 3]).get_params() == \
			{'mask_value' : -1.0, 'input_shape' : (None, 3)}
		with pytest.raises(ConversionError):
			Masking(mask_value=None)

	###########################################################################
	def test_flatten(self):
		""" Flatten layers take no arguments.
		"""
		assert Flatten().get_params() == {}

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
