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

from .layer import Layer, as_boolean
from .input import Input
from .dense import Dense, resolve_activation
from .reshape import Reshape
from .permute import Permute
from .repeat_vector import RepeatVector
from .lambda_layer import Lambda
from .activity_regularization import ActivityRegularization
from .masking import Masking
from .flatten import Flatten

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
