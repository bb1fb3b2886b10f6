#!/usr/bin/env python

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

import logging

from lxml import etree
from ncclient.operations.rpc import RPCError
from ncclient.xml_ import to_ele

from .util import NSMAP, rpc_text

#
# Request templates for the NETCONF console, prefilled from the selected node
#
GET = """<get xmlns="{nc}">{filter}</get>"""

EDIT_CONFIG = """<edit-config xmlns="{nc}">
  <target><running/></target>{default_operation}
  <config>{fragment}</config>
</edit-config>"""

COMMIT = """<commit xmlns="{nc}"/>"""

log = logging.getLogger(__name__)


def _fragment(node, operation=None, data=None, with_value=False):
  if node is None:
    return ""
  template = node.create_netconf_template(operation=operation, data=data, with_value=with_value)
  if template is None:
    return ""
  return etree.tostring(template, encoding="unicode")


def prepare_get(node=None, data=None):
  """
  :param node: selected SchemaNode, or None for an unfiltered get
  :param data: selected DataElement, narrows list entries to its keys
  :return: <get> request as a string
  """
  fragment = _fragment(node, data=data)
  return GET.format(nc=NSMAP["nc"], filter="<filter>{}</filter>".format(fragment) if fragment else "")


def prepare_edit(node=None, data=None, delete=False):
  """
  :param node:   selected SchemaNode
  :param data:   selected DataElement, supplies list keys and the leaf value to merge
  :param delete: build a delete request instead of a merge
  :return: <edit-config> request on running as a string
  """
  if delete:
    return EDIT_CONFIG.format(
      nc=NSMAP["nc"],
      default_operation="\n  <default-operation>none</default-operation>",
      fragment=_fragment(node, operation="delete", data=data),
    )
  return EDIT_CONFIG.format(
    nc=NSMAP["nc"], default_operation="", fragment=_fragment(node, data=data, with_value=True)
  )


def prepare_commit():
  return COMMIT.format(nc=NSMAP["nc"])


def send_request(conn, request):
  """
  Sends a raw RPC as typed in the console.

  :param conn:    ncclient manager
  :param request: RPC body as a string
  :return: reply XML, or the rpc-error XML if the device rejected the request
  """
  try:
    reply = conn.dispatch(to_ele(request))
  except RPCError as e:
    log.info("Request rejected: %s", e)
    return rpc_text(e.xml)
  return rpc_text(reply.xml)
