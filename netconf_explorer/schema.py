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
YANG schema nodes as consumed by the explorer.

The engine only navigates the schema and asks nodes for their subtree-filter
templates; parsing YANG modules is left to whoever builds these objects.
"""

from lxml import etree

NETCONF_NS = "urn:ietf:params:xml:ns:netconf:base:1.0"

# Schema statements that never appear as elements in a data tree
SCHEMA_ONLY = ("module", "submodule", "choice", "case", "input", "output")


class SchemaNode(object):
    """Napalm-style thin model of one YANG schema node."""

    text = ""

    def __init__(
        self,
        name,
        namespace=None,
        parent=None,
        keyword="container",
        is_key=False,
        description="",
        prefix=None,
    ):
        self.name = name
        self.parent = parent
        self.keyword = keyword
        self.is_key = is_key
        self.description = description
        self.children = []
        if parent is not None:
            parent.children.append(self)
            namespace = namespace or parent.namespace
            prefix = prefix or parent.prefix
        self.namespace = namespace
        self.prefix = prefix

    def add(self, name, keyword="container", **kwargs):
        """Creates a child node and returns it."""
        return SchemaNode(name, parent=self, keyword=keyword, **kwargs)

    @property
    def module(self):
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def is_data_node(self):
        return self.keyword not in SCHEMA_ONLY

    @property
    def keys(self):
        return [child.name for child in self.children if child.is_key]

    @property
    def caption(self):
        if self.keyword in ("leaf", "leaf-list") or not self.children:
            return self.name
        return "{} ({})".format(self.name, self.keyword)

    def ancestors(self):
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def is_ancestor_of(self, other):
        return any(node is self for node in other.ancestors())

    def data_children(self):
        """Children as they appear in a data tree, looking through choice/case."""
        for child in self.children:
            if child.keyword in ("choice", "case"):
                for grandchild in child.data_children():
                    yield grandchild
            elif child.is_data_node:
                yield child

    def lineage(self):
        """Data nodes from the top-level data node down to this node."""
        nodes = [self] + list(self.ancestors())
        return [node for node in reversed(nodes) if node.is_data_node]

    def path_segments(self):
        return [node.name for node in self.lineage()]

    def sensor_path(self):
        return "{}:{}".format(self.module.name, "/".join(self.path_segments()))

    def xpath(self):
        return "".join(
            "/{}:{}".format(node.prefix, node.name) if node.prefix else "/" + node.name
            for node in self.lineage()
        )

    def by_path(self, path):
        """
        Resolves a list of data node names below this node.

        :param path: names as returned by path_segments()
        :return: the SchemaNode, or None if any hop is unknown
        """
        node = self
        for hop in path:
            node = next((c for c in node.data_children() if c.name == hop), None)
            if node is None:
                return None
        return node

    def create_netconf_template(self, operation=None, data=None, with_value=False):
        """
        Renders a subtree-filter (or edit-config) fragment selecting this node.

        :param operation: optional NETCONF operation attribute for this node, e.g. "delete"
        :param data:      DataElement matching this node; list keys along the path
                          are filled in from it
        :param with_value: copy the value of a selected leaf from data
        :return: <type 'lxml.etree._Element'>, or None for nodes without a data representation
        """
        if not self.is_data_node:
            return None

        lineage = self.lineage()
        # DataElements aligned with the lineage, walking up from the selected data
        instances = [None] * len(lineage)
        current = data
        for index in range(len(lineage) - 1, -1, -1):
            if current is None or current.name != lineage[index].name:
                break
            instances[index] = current
            current = current.parent

        root = ele = None
        for index, (node, instance) in enumerate(zip(lineage, instances)):
            next_hop = lineage[index + 1].name if index + 1 < len(lineage) else None
            tag = etree.QName(node.namespace, node.name) if node.namespace else node.name
            nsmap = {}
            if node.namespace and (ele is None or ele.nsmap.get(None) != node.namespace):
                nsmap[None] = node.namespace
            if node is self and operation:
                nsmap["nc"] = NETCONF_NS
            if ele is None:
                ele = root = etree.Element(tag, nsmap=nsmap or None)
            else:
                ele = etree.SubElement(ele, tag, nsmap=nsmap or None)

            if instance is not None and node.keyword == "list":
                for key in node.keys:
                    value = instance.find(key)
                    if value is not None and key != next_hop:
                        key_tag = etree.QName(node.namespace, key) if node.namespace else key
                        etree.SubElement(ele, key_tag).text = value.text
            elif with_value and instance is not None and node is self and not node.children:
                ele.text = instance.text

        if operation:
            ele.set("{%s}operation" % NETCONF_NS, operation)
        return root

    def __repr__(self):
        return "<SchemaNode {}>".format(self.sensor_path() if self.parent else self.name)


def filter_modules(modules, module_query):
    """
    :param modules:      top-level SchemaNodes
    :param module_query: Query matched against the module name or its description
    :return: list of matching modules, in the given order
    """
    return [
        module
        for module in modules
        if module_query.matches(module.name) or module_query.matches(module.description)
    ]


def find_schema_node(modules, element):
    """
    Maps a data element back to its schema node.

    The path is built from the element up to (but excluding) the synthetic
    root; the namespace of the top-level element selects the module.

    :param modules: top-level SchemaNodes
    :param element: a DataElement of a retrieved document
    :return: SchemaNode or None
    """
    path = []
    namespace = None
    while element is not None and element.parent is not None:
        path.insert(0, element.name)
        namespace = element.namespace
        element = element.parent

    if not path:
        return None
    for module in modules:
        if module.namespace == namespace:
            node = module.by_path(path)
            if node is not None:
                return node
    return None
