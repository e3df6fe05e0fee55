from .api_provider import *  # NOQA
from .exceptions import *  # NOQA
from .response import *  # NOQA
from .transport import *  # NOQA
