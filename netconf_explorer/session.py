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

"""
NETCONF session adapter used by the explorer to retrieve data.
"""
# import standard library
import logging

# import third party libraries
from ncclient import manager
from ncclient.operations.errors import OperationError, TimeoutExpiredError
from ncclient.operations.rpc import RPCError
from ncclient.transport.errors import TransportError as NcclientTransportError
from ncclient.xml_ import to_ele, to_xml
from paramiko.ssh_exception import SSHException

# import local modules
from netconf_explorer.exceptions import RefusedError, TransportError
from netconf_explorer.filters import wrap_filter
from netconf_explorer.tree import DataElement

MODE_STATE = "state"
MODE_CONFIG = "config-only"

DATASTORES = ("running", "candidate", "startup")

log = logging.getLogger(__name__)


class NetconfSession(object):
    """Retrieves data documents over an ncclient manager connection."""

    def __init__(self, hostname=None, username=None, password=None, timeout=60, conn=None, optional_args=None):
        self.hostname = hostname
        self.username = username
        self.password = password
        self.timeout = timeout
        self.conn = conn

        if optional_args is None:
            optional_args = {}
        self.port = optional_args.get("port", 830)
        self.with_defaults = optional_args.get("with_defaults", None)
        self.device_params = optional_args.get("device_params", None)

    def open(self):
        """Opens the NETCONF connection to the host."""
        try:
            self.conn = manager.connect(
                host=self.hostname,
                port=self.port,
                username=self.username,
                password=self.password,
                hostkey_verify=False,
                timeout=self.timeout,
                device_params=self.device_params,
            )
        except (NcclientTransportError, SSHException, OSError) as e:
            log.error(
                f"Error in opening netconf connection to the node {self.hostname}:{self.port}"
            )
            raise TransportError(str(e))

    def close(self):
        if self.conn is not None:
            self.conn.close_session()
            self.conn = None

    def fetch(self, datastore, fragments, mode=MODE_STATE):
        """
        Retrieves data with a combined subtree filter.

        :param datastore: None for operational state, otherwise one of DATASTORES
        :param fragments: subtree-filter fragments; empty retrieves everything
        :param mode:      MODE_STATE uses <get>, MODE_CONFIG <get-config> on running
                          when no datastore is given
        :return: DataElement for the <data> element of the reply (the synthetic root)
        Raises: RefusedError - the device answered with an rpc-error
                TransportError - connection, session or timeout failure
        """
        if datastore is not None and datastore not in DATASTORES:
            raise ValueError("Unknown datastore: {}".format(datastore))

        subtree = wrap_filter(fragments)
        kwargs = {}
        if subtree is not None:
            kwargs["filter"] = subtree
        if self.with_defaults:
            kwargs["with_defaults"] = self.with_defaults

        if log.isEnabledFor(logging.DEBUG):
            log.debug(
                "Fetching datastore=%s mode=%s filter=%s",
                datastore, mode, to_xml(to_ele(subtree), pretty_print=True) if subtree else None,
            )

        try:
            if datastore is None and mode == MODE_STATE:
                reply = self.conn.get(**kwargs)
            else:
                reply = self.conn.get_config(source=datastore or "running", **kwargs)
            data = to_ele(reply.data_xml)
        except RPCError as e:
            raise RefusedError(e.message or str(e), tag=e.tag)
        except (NcclientTransportError, TimeoutExpiredError, OperationError, SSHException) as e:
            raise TransportError(str(e))

        if log.isEnabledFor(logging.DEBUG):
            log.debug(to_xml(data, pretty_print=True))
        return DataElement.from_xml(data)
