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

from lxml import etree
from ncclient.xml_ import to_xml

NSMAP = {
 "nc": "urn:ietf:params:xml:ns:netconf:base:1.0",
}

def rpc_text(xml):
    """
    Pretty printed text of an RPC reply or rpc-error.

    :param xml: <type 'lxml.etree._Element'> or an XML string
    :return: a str value.
    """
    if xml is None:
        return ""
    if etree.iselement(xml):
        return to_xml(xml, pretty_print=True)
    return xml
