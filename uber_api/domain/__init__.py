from .deliveries import *  # NOQA
from .drivers import *  # NOQA
from .estimates import *  # NOQA
from .exceptions import *  # NOQA
from .pagination import *  # NOQA
from .payments import *  # NOQA
from .places import *  # NOQA
from .products import *  # NOQA
from .profiles import *  # NOQA
from .rides import *  # NOQA
from .trips import *  # NOQA
from .types import *  # NOQA
from .value_object import *  # NOQA
