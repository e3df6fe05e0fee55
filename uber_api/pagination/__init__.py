from .page_stream import *  # NOQA
