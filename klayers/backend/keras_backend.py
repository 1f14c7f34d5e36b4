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

import os
import sys
import logging

from . import Backend
from ..utils import can_import

logger = logging.getLogger(__name__)

###############################################################################
class KerasBackend(Backend):
	""" A Keras 3 backend.

		# Dependencies

		- keras
		- tensorflow, jax OR torch
	"""

	COMPUTE_BACKENDS = ('tensorflow', 'jax', 'torch', 'numpy')

	###########################################################################
	@classmethod
	def is_supported(cls):
		""" Returns True if this backend can be used.
		"""
		return can_import('keras')

	###########################################################################
	def __init__(self, backend=None):
		""" Creates a new Keras backend.

			# Arguments

			backend: str or None (default: None). The compute backend Keras
				should run on ("tensorflow", "jax", "torch" or "numpy"). None
				leaves the choice to Keras (the `KERAS_BACKEND` environmental
				variable or the Keras configuration file).
		"""
		super().__init__()

		if backend is not None:
			if backend not in self.COMPUTE_BACKENDS:
				raise ValueError('Unknown Keras compute backend: {}. Must be '
					'one of: {}'.format(
						backend, ', '.join(self.COMPUTE_BACKENDS)))

			logger.info('The %s backend for Keras has been requested.',
				backend)

			if 'keras' in sys.modules:
				import keras					# pylint: disable=import-error
				if keras.config.backend() != backend:
					logger.warning('Keras was already imported by the time '
						'the backend was instantiated. We were asked to use '
						'the Keras %s backend, but Keras is already using %s. '
						'We cannot change the Keras backend at this point, so '
						'we will try to work with the currently loaded '
						'backend.', backend, keras.config.backend())
			else:
				os.environ['KERAS_BACKEND'] = backend

			if backend != 'numpy' and not can_import(backend):
				logger.warning('Keras was asked to use the %s backend, but '
					'%s does not appear to be installed. You will likely get '
					'an error about this soon.', backend, backend)

		import keras							# pylint: disable=import-error
		logger.debug('Keras %s is using the %s backend.', keras.__version__,
			keras.config.backend())

	###########################################################################
	def floatx(self):
		""" Returns the global Keras float type.
		"""
		import keras							# pylint: disable=import-error
		return keras.config.floatx()

	###########################################################################
	def create_layer(self, layer_name, **kwargs):
		""" Constructs a layer from `keras.layers`.
		"""
		import keras.layers as L				# pylint: disable=import-error
		func = getattr(L, layer_name, None)
		if func is None:
			raise ValueError('Keras has no such layer: {}'.format(layer_name))
		logger.trace('Calling keras.layers.%s with arguments: %s',
			layer_name, kwargs)
		return func(**kwargs)

	###########################################################################
	def create_sequential(self, name=None):
		""" Creates a new, empty `keras.Sequential` model.
		"""
		import keras							# pylint: disable=import-error
		return keras.Sequential(name=name)

	###########################################################################
	def is_sequential(self, x):
		""" Checks for a `keras.Sequential` model.
		"""
		import keras							# pylint: disable=import-error
		return isinstance(x, keras.Sequential)

	###########################################################################
	def is_tensor(self, x):
		""" Checks for a symbolic Keras tensor or a native backend tensor.
		"""
		import keras							# pylint: disable=import-error
		return isinstance(x, keras.KerasTensor) or keras.ops.is_tensor(x)

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
