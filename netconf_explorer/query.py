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
Free-text search queries for the schema and data trees.
"""


class Query(tuple):
    """
    Lowercase search tokens, matched as substrings and combined with AND.

    A query without tokens matches everything.
    """

    def __new__(cls, text=""):
        if isinstance(text, str):
            tokens = text.lower().split()
        else:
            tokens = [t.lower() for t in text if t]
        return super(Query, cls).__new__(cls, tokens)

    def matches(self, value):
        """
        :param value: the string to test, e.g. an element name or leaf value
        :return: True if every token occurs in the lowercased value
        """
        value = (value or "").lower()
        return all(token in value for token in self)

    def __repr__(self):
        return "Query({!r})".format(" ".join(self))


EMPTY = Query()
