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

import logging

BLACK, RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, WHITE = range(8)

RESET_SEQ = '\033[0m'
COLOR_SEQ = '\033[1;{}m'
BOLD_SEQ = '\033[1m'

# Color codes for each log-level. Unknown levels are left uncolored.
COLORS = {
	'TRACE': CYAN,
	'DEBUG': BLUE,
	'INFO': WHITE,
	'WARNING': YELLOW,
	'ERROR': RED,
	'CRITICAL': RED
}

###############################################################################
def basicConfig(level=None, format=None, stream=None):	# pylint: disable=invalid-name,redefined-builtin
	""" Configures the root logger with a single colored stream handler.

		This is a stand-in for `logging.basicConfig()` used by the `klayers`
		command-line tool. Like its standard-library counterpart, it does
		nothing if the root logger already has handlers.

		# Arguments

		level: int or None (default: None). The log-level for the root logger.
		format: str or None (default: None). A %-style format string. The
			placeholders `$COLOR`, `$BOLD` and `$RESET` are replaced by ANSI
			escape sequences.
		stream: file-like or None (default: None). Where to write. Defaults to
			stderr.
	"""
	logger = logging.getLogger()
	if logger.hasHandlers():
		return

	handler = logging.StreamHandler(stream=stream)
	handler.setFormatter(ColorFormatter(fmt=format))
	logger.addHandler(handler)

	if level is not None:
		logger.setLevel(level)

###############################################################################
class ColorFormatter(logging.Formatter):
	""" A formatter which can produce colored log lines.

		# Usage

		```python
		from klayers.utils import logcolor

		logcolor.basicConfig(
			level=logging.DEBUG,
			format='$COLOR[%(levelname)s %(name)s]$RESET %(message)s'
		)
		```
	"""

	###########################################################################
	def format(self, record):
		""" Formats the log record, substituting the color placeholders.
		"""
		message = super().format(record)
		code = COLORS.get(record.levelname)
		color = COLOR_SEQ.format(30 + code) if code is not None else ''
		message = message.replace('$RESET', RESET_SEQ) \
			.replace('$BOLD', BOLD_SEQ).replace('$COLOR', color)
		return message + RESET_SEQ

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
