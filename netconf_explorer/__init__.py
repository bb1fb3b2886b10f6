# -*- coding: utf-8 -*-
# © 2022 Nokia
# Licensed under the Apache License 2.0 License
# SPDX-License-Identifier: Apache-2.0

"""Schema-scoped data explorer for NETCONF devices."""

from netconf_explorer.exceptions import RefusedError, TransportError
from netconf_explorer.explorer import DataView, Explorer
from netconf_explorer.session import NetconfSession

__all__ = ("Explorer", "DataView", "NetconfSession", "RefusedError", "TransportError")
