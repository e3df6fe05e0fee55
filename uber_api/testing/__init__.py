from .fake_transport import *  # NOQA
