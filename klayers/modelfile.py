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
import copy
import inspect
import logging

import yaml

from .compose import call_layer
from .errors import ParsingError
from .layers import Layer, Input
from .settings import Settings

logger = logging.getLogger(__name__)

###############################################################################
class ModelFile:
	""" Class for loading model files and building sequential models from
		them.

		# Format

		```yaml
		settings:
		  floatx: float32
		  backend: keras
		name: my_model
		model:
		  - input: [16]
		  - dense: {units: 32, activation: relu}
		  - repeat_vector: 3
		    name: repeated
		  - flatten
		```

		Each model entry has exactly one layer key. Its value is either a
		dictionary of keyword arguments, a single value for the layer's primary
		argument (e.g., `units` for dense layers), or nothing at all. A `name`
		key may appear beside the layer key.
	"""

	###########################################################################
	def __init__(self, source, settings=None):
		""" Creates a new model file.

			# Arguments

			source: str or dict. If it is a string, it is interpretted as a
				filename to an on-disk YAML file. Otherwise, it is
				interpretted as already-loaded data.
			settings: Settings or None (default: None). Overrides the
				"settings" section of the file.
		"""
		if isinstance(source, str):
			filename = os.path.expanduser(os.path.expandvars(source))
			if not os.path.isfile(filename):
				raise IOError('No such file found: {}. Path was expanded to: '
					'{}.'.format(source, filename))
			logger.debug('Loading model file: %s', filename)
			self.filename = filename
			with open(filename) as fh:
				self.data = yaml.safe_load(fh)
		else:
			self.filename = None
			self.data = copy.deepcopy(source)

		if not isinstance(self.data, dict):
			raise ParsingError('Model files must contain a dictionary at the '
				'top level.')

		unknown = set(self.data) - {'settings', 'name', 'model'}
		if unknown:
			raise ParsingError('Unknown sections in model file: {}'.format(
				', '.join(sorted(unknown))))

		if settings is None:
			settings = Settings.from_dict(self.data.get('settings'))
		elif 'settings' in self.data:
			logger.info('Ignoring the "settings" section of the model file, '
				'since settings were given explicitly.')
		self.settings = settings

		self.name = self.data.get('name')
		self.records = None

	###########################################################################
	def parse(self):
		""" Parses the "model" section into layer records.

			# Return value

			The list of Layer records, which is also stored as `self.records`.
		"""
		entries = self.data.get('model')
		if not isinstance(entries, list) or not entries:
			raise ParsingError('Model files need a non-empty list of layers '
				'in the "model" section.')

		self.records = [self.parse_entry(entry) for entry in entries]
		logger.debug('Parsed %d layers.', len(self.records))
		return self.records

	###########################################################################
	def parse_entry(self, entry):
		""" Turns a single model entry into a layer record.
		"""
		if isinstance(entry, str):
			entry = {entry : None}
		if not isinstance(entry, dict):
			raise ParsingError('Each layer must be a dictionary or a layer '
				'name. Received: {}'.format(entry))

		data = dict(entry)
		name = data.pop('name', None)
		if len(data) != 1:
			raise ParsingError('Each layer needs exactly one layer type. '
				'Received: {}'.format(', '.join(sorted(data)) or 'none'))
		(key, args), = data.items()

		try:
			cls = Layer.get_layer_by_key(key)
		except ValueError:
			raise ParsingError('Unknown layer type: {}'.format(key))
		if not cls.FILE_SUPPORTED:
			raise ParsingError('"{}" layers cannot be used in model files.'
				.format(key))

		if args is None:
			kwargs = {}
		elif isinstance(args, dict):
			kwargs = dict(args)
		elif cls.PRIMARY is not None:
			kwargs = {cls.PRIMARY : args}
		else:
			raise ParsingError('"{}" layers must be given a dictionary of '
				'arguments, or nothing. Received: {}'.format(key, args))

		if name is not None:
			if 'name' in kwargs and kwargs['name'] != name:
				logger.warning('Conflicting names for layer: "%s" and "%s". '
					'Using: "%s".', kwargs['name'], name, name)
			kwargs['name'] = name

		if cls is Input and kwargs.get('dtype') is None:
			kwargs['dtype'] = self.settings.floatx

		self._check_arguments(cls, kwargs)
		return cls(**kwargs)

	###########################################################################
	@staticmethod
	def _check_arguments(cls, kwargs):
		""" Makes sure the arguments fit the record's constructor.
		"""
		params = inspect.signature(cls).parameters
		unknown = set(kwargs) - set(params)
		if unknown:
			raise ParsingError('Unknown arguments for "{}" layer: {}'.format(
				cls.get_layer_key(), ', '.join(sorted(unknown))))
		missing = [
			param.name for param in params.values()
			if param.default is param.empty and param.name not in kwargs
		]
		if missing:
			raise ParsingError('Missing required arguments for "{}" layer: {}'
				.format(cls.get_layer_key(), ', '.join(missing)))

	###########################################################################
	def build(self):
		""" Builds a sequential model from the file.

			# Return value

			The framework's sequential model, with every layer added.
		"""
		if self.records is None:
			self.parse()

		backend = self.settings.get_backend()
		model = backend.create_sequential(name=self.name)
		for record in self.records:
			logger.debug('Adding layer: %s', record)
			call_layer(record, model, self.settings)
		return model

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
