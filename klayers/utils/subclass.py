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
def get_subclasses(cls, recursive=True):
	""" Enumerates the subclasses of a class, in definition order.

		Backends and layer records register themselves simply by subclassing,
		so this is how `Backend.get_all_backends()` and
		`Layer.get_layer_by_key()` discover them.

		# Arguments

		cls: class. The class to enumerate subclasses for.
		recursive: bool (default: True). If True, subclasses of subclasses are
			included as well, each after its parent.

		# Return value

		A list of classes. `cls` itself is not included.
	"""
	result = []
	for sub in cls.__subclasses__():
		result.append(sub)
		if recursive:
			result.extend(get_subclasses(sub, recursive=True))
	return result

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
