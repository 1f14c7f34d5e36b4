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

###############################################################################
import sys

###############################################################################
if sys.version_info < (3, 9):
	print('klayers requires Python 3.9 or later.', file=sys.stderr)
	sys.exit(1)

###############################################################################
# pylint: disable=wrong-import-position
import os
from setuptools import setup, find_packages
# pylint: enable=wrong-import-position

################################################################################
def readme():
	""" Return the README text.
	"""
	readme_rst = os.path.join(os.path.dirname(__file__), 'README.rst')
	with open(readme_rst, 'rb') as fh:
		result = fh.read()

	result = result.decode('utf-8')

	token = '.. package_readme_ends_here'
	mark = result.find(token)
	if mark >= 0:
		result = result[:mark]

	return result

################################################################################
def get_version():
	""" Gets the current version of the package.
	"""
	version_py = os.path.join(os.path.dirname(__file__), 'klayers',
		'version.py')
	with open(version_py, 'r') as fh:
		for line in fh:
			if line.startswith('__version__'):
				return line.split('=')[-1].strip().replace('"', '')
	raise ValueError('Failed to parse version from: {}'.format(version_py))

################################################################################
setup(
	# Package information
	name='klayers',
	version=get_version(),
	description='Keras core layers behind plain, argument-checking functions',
	long_description=readme(),
	long_description_content_type='text/x-rst',
	keywords='deep learning keras layers',
	classifiers=[
	],

	license='Apache Software License '
		'(http://www.apache.org/licenses/LICENSE-2.0)',

	# What is packaged here.
	packages=find_packages(include=['klayers', 'klayers.*']),

	# Dependencies
	python_requires='>=3.9',
	install_requires=[
		'numpy>=1.21',
		'pyyaml>=5.1',

		# Keras, and a compute backend for it.
		'keras>=3.2',
		'tensorflow>=2.16'
	],

	# Testing
	extras_require={
		'test': ['pytest']
	},

	entry_points={
		'console_scripts' : ['klayers=klayers.__main__:main']
	},

	zip_safe=False
)

#### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
