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

from klayers import Backend, KerasBackend, Settings

###############################################################################
class FakeLayer:
	""" Stands in for a framework layer. Calling it on a tensor produces a new
		FakeTensor which remembers where it came from.
	"""

	def __init__(self, layer_name, **kwargs):
		self.layer_name = layer_name
		self.config = kwargs
		self.calls = []

	def __call__(self, x):
		self.calls.append(x)
		return FakeTensor(source=self, inputs=x)

	def __repr__(self):
		return 'FakeLayer({})'.format(self.layer_name)

###############################################################################
class FakeTensor:
	""" Stands in for a symbolic tensor.
	"""

	def __init__(self, source=None, inputs=None, config=None):
		self.source = source
		self.inputs = inputs
		self.config = config or {}

###############################################################################
class FakeSequential:
	""" Stands in for a sequential model. It is callable, like the real thing.
	"""

	def __init__(self, name=None):
		self.name = name
		self.layers = []

	def add(self, layer):
		self.layers.append(layer)

	def summary(self):
		print('Model: {}'.format(self.name))
		for layer in self.layers:
			print('  {!r}'.format(layer))

	def __call__(self, x):
		raise AssertionError('Sequential models should never be called.')

###############################################################################
class FakeBackend(Backend):
	""" A backend which records every layer it is asked to create, instead of
		touching a real framework.
	"""

	@classmethod
	def is_supported(cls):
		return True

	def __init__(self, floatx='float64'):
		super().__init__()
		self._floatx = floatx
		self.created = []

	def floatx(self):
		return self._floatx

	def create_layer(self, layer_name, **kwargs):
		self.created.append((layer_name, kwargs))
		if layer_name == 'Input':
			return FakeTensor(config=kwargs)
		return FakeLayer(layer_name, **kwargs)

	def create_sequential(self, name=None):
		return FakeSequential(name=name)

	def is_sequential(self, x):
		return isinstance(x, FakeSequential)

	def is_tensor(self, x):
		return isinstance(x, FakeTensor)

###############################################################################
@pytest.fixture
def fake_backend():
	""" Returns a new fake backend.
	"""
	return FakeBackend()

###############################################################################
@pytest.fixture
def fake_settings(fake_backend):
	""" Returns settings which use the fake backend.
	"""
	return Settings(backend=fake_backend)

###############################################################################
@pytest.fixture
def keras_backend():
	""" Returns a real Keras backend.
	"""
	if not KerasBackend.is_supported():
		pytest.xfail('Keras is not installed and cannot be tested.')
	return KerasBackend()

###############################################################################
@pytest.fixture
def keras_settings(keras_backend):
	""" Returns settings which use the Keras backend.
	"""
	return Settings(backend=keras_backend)

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
