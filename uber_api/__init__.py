# -*- coding: utf-8 -*-
# (c) Nelen & Schuurmans

from .api_client.api_provider import ApiProvider  # NOQA
from .api_client.exceptions import *  # NOQA
from .api_client.response import *  # NOQA
from .api_client.transport import *  # NOQA
from .client import UberClient  # NOQA
from .domain.deliveries import *  # NOQA
from .domain.drivers import *  # NOQA
from .domain.estimates import *  # NOQA
from .domain.exceptions import *  # NOQA
from .domain.pagination import *  # NOQA
from .domain.payments import *  # NOQA
from .domain.places import *  # NOQA
from .domain.products import *  # NOQA
from .domain.profiles import *  # NOQA
from .domain.rides import *  # NOQA
from .domain.trips import *  # NOQA
from .domain.types import *  # NOQA
from .domain.value_object import *  # NOQA
from .oauth2.client_credentials import *  # NOQA
from .oauth2.token_transport import TokenTransport  # NOQA
from .pagination.page_stream import PageStream  # NOQA
from .pagination.page_stream import paginate  # NOQA
from .pagination.page_stream import stream_once  # NOQA
from .settings import *  # NOQA

# fmt: off
__version__ = '0.1.0.dev0'
# fmt: on
