from .client_credentials import *  # NOQA
from .token_transport import *  # NOQA
