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

import sys
import argparse
import logging

from . import __version__, Backend, Settings, ModelFile, KlayersError
from .utils import logcolor

logger = logging.getLogger(__name__)

###############################################################################
def version(args):							# pylint: disable=unused-argument
	""" Prints the version and exits.
	"""
	print('klayers, version {}'.format(__version__))

###############################################################################
def info(args):								# pylint: disable=unused-argument
	""" Prints the available backends and the active settings.
	"""
	settings = Settings.from_environment()
	print('klayers, version {}'.format(__version__))
	print('Default float type: {}'.format(settings.floatx))
	print('Backends:')
	for cls in Backend.get_all_backends(supported_only=False):
		print('  {}: {}'.format(
			cls.get_name(),
			'supported' if cls.is_supported() else 'not installed'
		))

###############################################################################
def build(args):
	""" Builds a model from a model file and prints its summary.
	"""
	try:
		settings = Settings.from_file(args.settings) if args.settings else None
		spec = ModelFile(args.modelfile, settings=settings)
		model = spec.build()
	except (KlayersError, IOError) as exc:
		logger.error('Failed to build the model: %s', exc)
		return 1
	model.summary()
	return 0

###############################################################################
def parse_args(argv=None):
	""" Constructs an argument parser and returns the parsed arguments.
	"""
	parser = argparse.ArgumentParser(
		description='Build Keras core layers from Python or YAML.')
	parser.add_argument('--no-color', action='store_true',
		help='Disable colorful logging.')
	parser.add_argument('-v', '--verbose', default=0, action='count',
		help='Increase verbosity. Can be specified up to three times for '
			'trace-level output.')
	parser.add_argument('--version', action='store_true',
		help='Display version and exit.')

	subparsers = parser.add_subparsers(dest='cmd', help='Sub-command help.')

	subparser = subparsers.add_parser('info',
		help='Shows the available backends and default settings.')
	subparser.set_defaults(func=info)

	subparser = subparsers.add_parser('build',
		help='Builds a sequential model from a model file and prints a '
			'summary. This is useful for debugging a model.')
	subparser.add_argument('modelfile', help='The model file to use.')
	subparser.add_argument('-s', '--settings',
		help='A YAML settings file which overrides the "settings" section of '
			'the model file.')
	subparser.set_defaults(func=build)

	return parser.parse_args(argv)

###############################################################################
def main(argv=None):
	""" Entry point for the klayers command-line script.
	"""
	args = parse_args(argv)

	loglevel = {
		0 : logging.WARNING,
		1 : logging.INFO,
		2 : logging.DEBUG
	}
	config = logging.basicConfig if args.no_color else logcolor.basicConfig
	config(
		level=loglevel.get(args.verbose, logging.TRACE),
		format='{color}[%(levelname)s %(asctime)s %(name)s:%(lineno)s]{reset} '
			'%(message)s'.format(
				color='' if args.no_color else '$COLOR',
				reset='' if args.no_color else '$RESET'
			)
	)

	# Keras warns about `input_shape` arguments.
	logging.captureWarnings(True)

	if args.version:
		args.func = version
	elif not hasattr(args, 'func'):
		print('Nothing to do!', file=sys.stderr)
		print('For usage information, try: klayers --help', file=sys.stderr)
		return 1

	return args.func(args) or 0

###############################################################################
if __name__ == '__main__':
	sys.exit(main())

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
