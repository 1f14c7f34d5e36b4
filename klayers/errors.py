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
class KlayersError(Exception):
	""" Base class for all errors raised by klayers itself.

		Errors raised by the underlying framework are never wrapped in one of
		these; they propagate to the caller unchanged.
	"""
	pass

###############################################################################
class ConversionError(KlayersError, ValueError):
	""" An argument could not be coerced to the required numeric type.
	"""
	pass

###############################################################################
class InvalidArgumentError(KlayersError, TypeError):
	""" An argument is of the wrong kind, or holds a value the layer cannot
		accept.
	"""
	pass

###############################################################################
class ParsingError(KlayersError):
	""" A model file could not be interpretted.
	"""
	pass

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
