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

from klayers import __version__
from klayers.__main__ import main

###############################################################################
@pytest.fixture
def model_file(tmpdir):
	""" Writes a model file which uses the fake backend.
	"""
	filename = tmpdir.join('model.yml')
	filename.write(
		'settings:\n'
		'  backend: fake\n'
		'name: cli\n'
		'model:\n'
		'  - dense: {units: 4, input_shape: [8]}\n'
		'  - flatten\n'
	)
	return str(filename)

###############################################################################
class TestMain:
	""" Tests for the command-line tool.
	"""

	###########################################################################
	def test_version(self, capsys):
		""" --version prints the version.
		"""
		assert main(['--version']) == 0
		assert __version__ in capsys.readouterr().out

	###########################################################################
	def test_nothing_to_do(self, capsys):
		""" Without a sub-command, we fail.
		"""
		assert main([]) == 1
		assert 'Nothing to do' in capsys.readouterr().err

	###########################################################################
	def test_info(self, capsys):
		""" info lists the backends.
		"""
		assert main(['--no-color', 'info']) == 0
		out = capsys.readouterr().out
		assert 'keras' in out
		assert 'fake: supported' in out

	###########################################################################
	def test_build(self, model_file, capsys):
		""" build prints a summary of the model.
		"""
		assert main(['--no-color', 'build', model_file]) == 0
		out = capsys.readouterr().out
		assert 'Model: cli' in out
		assert 'FakeLayer(Dense)' in out
		assert 'FakeLayer(Flatten)' in out

	###########################################################################
	def test_build_failure(self, tmpdir):
		""" Bad model files give a non-zero exit code.
		"""
		filename = tmpdir.join('bad.yml')
		filename.write(
			'settings:\n'
			'  backend: fake\n'
			'model:\n'
			'  - dense: {units: 0}\n'
		)
		assert main(['--no-color', 'build', str(filename)]) == 1

	###########################################################################
	def test_build_unknown_section(self, tmpdir):
		""" Unknown top-level sections give a non-zero exit code.
		"""
		filename = tmpdir.join('bogus.yml')
		filename.write(
			'bogus: 1\n'
			'model:\n'
			'  - flatten\n'
		)
		assert main(['--no-color', 'build', str(filename)]) == 1

	###########################################################################
	def test_build_missing_file(self, tmpdir):
		""" Missing model and settings files give a non-zero exit code.
		"""
		missing = str(tmpdir.join('missing.yml'))
		assert main(['--no-color', 'build', missing]) == 1

		filename = tmpdir.join('model.yml')
		filename.write('model:\n  - flatten\n')
		assert main(['--no-color', 'build', '-s', missing,
			str(filename)]) == 1

	###########################################################################
	def test_settings_override(self, model_file, tmpdir, capsys):
		""" A settings file can be given on the command line.
		"""
		settings = tmpdir.join('settings.yml')
		settings.write('backend: fake\nfloatx: float64\n')
		assert main(['--no-color', 'build', '-s', str(settings),
			model_file]) == 0
		assert 'Model: cli' in capsys.readouterr().out

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
