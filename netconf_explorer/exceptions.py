# -*- coding: utf-8 -*-
# © 2022 Nokia
# Licensed under the Apache License 2.0 License
# SPDX-License-Identifier: Apache-2.0

#
# The contents of this file are licensed under the Apache License, Version 2.0
# (the "License"); you may not use this file except in compliance with the
# License. You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations under
# the License.

from napalm.base.exceptions import ConnectionException


class ExplorerException(Exception):
    """Base class for errors raised while retrieving device data."""


class RefusedError(ExplorerException):
    """
    The device answered the RPC with an rpc-error, e.g. it declined to return
    operational state for the requested filter.
    """

    def __init__(self, message, tag=None):
        super(RefusedError, self).__init__(message)
        self.tag = tag


class TransportError(ExplorerException, ConnectionException):
    """Connection, session or protocol failure while talking to the device."""
