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
Data documents retrieved from a device and per-pass views on them.
"""

from lxml import etree

ROOT = "root"
EXPAND = "expand"


class DataElement(object):
    """One node of a retrieved NETCONF data document."""

    def __init__(self, name, namespace=None, text="", parent=None):
        self.name = name
        self.namespace = namespace
        self.text = text or ""
        self.parent = parent
        self.children = []
        if parent is not None:
            parent.children.append(self)

    @classmethod
    def from_xml(cls, ele, parent=None):
        """
        Converts an lxml element and its subtree. Comments and processing
        instructions are skipped, text is only kept for elements without
        child elements.

        :param ele:    <type 'lxml.etree._Element'>, usually the <data> element of a reply
        :param parent: parent DataElement, None for the synthetic root
        :return: the new DataElement
        """
        qname = etree.QName(ele)
        element = cls(qname.localname, qname.namespace, parent=parent)
        children = [child for child in ele if isinstance(child.tag, str)]
        if children:
            for child in children:
                cls.from_xml(child, parent=element)
        elif ele.text is not None:
            element.text = ele.text.strip()
        return element

    def to_xml(self, parent=None):
        """Converts the element and its subtree back to lxml."""
        tag = etree.QName(self.namespace, self.name) if self.namespace else self.name
        parent_ns = parent.nsmap.get(None) if parent is not None else None
        nsmap = {None: self.namespace} if self.namespace and self.namespace != parent_ns else None
        if parent is None:
            ele = etree.Element(tag, nsmap=nsmap)
        else:
            ele = etree.SubElement(parent, tag, nsmap=nsmap)
        if self.children:
            for child in self.children:
                child.to_xml(ele)
        elif self.text:
            ele.text = self.text
        return ele

    def append(self, child):
        child.parent = self
        self.children.append(child)
        return child

    def find(self, name):
        """Returns the first direct child with the given name, or None."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def iter(self):
        """Iterates the element and all its descendants in document order."""
        yield self
        for child in self.children:
            for element in child.iter():
                yield element

    def count(self):
        return sum(1 for _ in self.iter())

    @property
    def caption(self):
        # Name of the node, plus the value for leafs
        if self.children:
            return self.name
        return "{} = {}".format(self.name, self.text)

    def __iter__(self):
        return iter(self.children)

    def __repr__(self):
        return "<DataElement {}>".format(self.caption)


class TreeView(object):
    """
    The result of one projection pass over a tree.

    Visible children, transient tags and expansion state are kept here, keyed
    by element identity, so the projected document itself is never modified.
    Works for any node type exposing ``name``, ``text`` and ``children``.
    """

    def __init__(self):
        self.roots = []
        self._items = {}
        self._children = {}
        self._parents = {}
        self._tags = {}
        self._expanded = {}

    def add(self, parent, element):
        key = id(element)
        self._items[key] = element
        self._children[key] = []
        self._parents[key] = parent
        if parent is None:
            self.roots.append(element)
        else:
            self._children[id(parent)].append(element)

    def remove(self, element):
        """Removes the element and whatever is still visible below it."""
        for child in list(self._children.get(id(element), [])):
            self.remove(child)
        key = id(element)
        parent = self._parents.pop(key, None)
        if parent is None:
            if element in self.roots:
                self.roots.remove(element)
        else:
            self._children[id(parent)].remove(element)
        self._items.pop(key, None)
        self._children.pop(key, None)
        self._tags.pop(key, None)
        self._expanded.pop(key, None)

    def children(self, element):
        return list(self._children.get(id(element), []))

    def parent(self, element):
        return self._parents.get(id(element))

    def tag(self, element, tag):
        self._tags.setdefault(id(element), set()).add(tag)

    def has_tag(self, element, tag):
        return tag in self._tags.get(id(element), ())

    def expand(self, element):
        self._expanded[id(element)] = element

    def is_expanded(self, element):
        return id(element) in self._expanded

    @property
    def expanded(self):
        return [self._items[key] for key in self._expanded if key in self._items]

    def walk(self, elements=None):
        """Iterates visible elements depth-first in document order."""
        for element in self.roots if elements is None else elements:
            yield element
            for child in self.walk(self._children.get(id(element), [])):
                yield child

    def __contains__(self, element):
        return id(element) in self._items and self._items[id(element)] is element

    def __len__(self):
        return len(self._items)
